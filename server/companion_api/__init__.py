"""Wellness Companion API package."""
