"""Core state containers: characters, events and tick timing."""
