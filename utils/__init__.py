"""Low-level helpers shared by modules."""
