"""Experience and levelling."""
