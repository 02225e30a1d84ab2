"""Ambient configuration, logging and shared constants."""
