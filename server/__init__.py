"""Wellness Companion server packages."""
