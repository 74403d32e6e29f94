"""
Top‑level package for the Scheduling Admin API.

This file makes ``scheduling_admin_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``scheduling_admin_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
