"""Adapters: configuration, logging and persistence."""
