"""Shared infrastructure: settings, logging, database, auth and errors."""
