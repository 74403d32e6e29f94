"""
Pydantic schema definitions for API payloads.

Each domain (profile, services, availability) defines its own models
for request and response bodies.  The request models carry the
validation rules; ``core.validation`` runs them against untrusted
input and turns failures into field‑level issues.
"""
