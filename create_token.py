#!/usr/bin/env python3
"""
Mint a development bearer token for the Scheduling Admin API.

In production tokens come from the identity provider.  For local work
and manual testing this script signs a token with ``AUTH_SECRET`` so
the API accepts it.  The ``--sub`` value becomes the caller identity
that owns the profile, services and availability.

Usage:
    AUTH_SECRET=... python create_token.py --sub 11111111-1111-1111-1111-111111111111 --days 30
"""

import argparse
import sys

from scheduling_admin_api.app.core.security import create_access_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a signed bearer token for local use.")
    ap.add_argument("--sub", required=True, help="Caller identity (token subject)")
    ap.add_argument("--days", type=int, default=1, help="Token lifetime in days (default: 1)")
    args = ap.parse_args()

    if not args.sub.strip():
        print("[!] Empty subject is not allowed.", file=sys.stderr)
        sys.exit(1)
    if args.days < 1:
        print("[!] --days must be at least 1.", file=sys.stderr)
        sys.exit(1)

    print(create_access_token({"sub": args.sub}, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
