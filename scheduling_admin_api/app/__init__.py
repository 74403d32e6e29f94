"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (profile, services, availability) keeps its
request/response schemas in ``schemas``, its store access in
``services`` and its HTTP routes in ``api/endpoints``.  Shared
plumbing (configuration, logging, database, authentication, error
mapping and input validation) lives in ``core``.
"""

from .main import app  # noqa: F401
