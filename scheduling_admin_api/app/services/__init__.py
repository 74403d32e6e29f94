"""
Service layer.

Each service encapsulates store access for one domain.  Every method
takes the caller identity (``owner_id``) as its first argument and
filters on it server‑side, so one tenant can never read or change
another tenant's rows.
"""
