"""Per-tick systems operating on character state."""
