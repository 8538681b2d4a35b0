"""Resource pool systems."""
