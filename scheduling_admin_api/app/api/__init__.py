"""
HTTP API of the scheduling admin application.

All routes are mounted under ``/api`` by ``main.create_app``.
"""
