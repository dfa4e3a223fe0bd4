from core import bootstrap


def test_initialize_prints_once(fresh_bootstrap, capsys):
    fresh_bootstrap.initialize()
    fresh_bootstrap.initialize()

    out = capsys.readouterr().out
    assert out.splitlines() == [bootstrap.BOOTSTRAP_MESSAGE]
    assert fresh_bootstrap.has_run()


def test_reset_allows_second_run(fresh_bootstrap, capsys):
    fresh_bootstrap.initialize()
    fresh_bootstrap.reset()
    assert not fresh_bootstrap.has_run()
    fresh_bootstrap.initialize()

    assert capsys.readouterr().out.count(bootstrap.BOOTSTRAP_MESSAGE) == 2
