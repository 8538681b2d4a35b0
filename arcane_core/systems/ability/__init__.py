"""Ability cooldowns, learning and casting."""
