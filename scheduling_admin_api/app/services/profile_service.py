"""
Service layer for business profiles.

A profile is keyed by the caller identity.  Saving creates the row on
first use and updates ``business_name`` afterwards.  The public slug is
derived from the business name once, when the profile is created, and
is kept stable across renames so shared links keep working.
"""

from __future__ import annotations

import logging
import re
import sqlite3
import unicodedata
from typing import Optional

from scheduling_admin_api.app.core.db import get_connection, transaction
from scheduling_admin_api.app.schemas.profile import ProfileRead, ProfileUpdate

logger = logging.getLogger(__name__)

SLUG_MAX_LENGTH = 50
DEFAULT_SLUG = "business"


def slugify(name: str) -> str:
    """Turn a business name into a URL slug.

    Accents are stripped, anything outside ``a-z``, digits, spaces and
    hyphens is dropped, and runs of spaces or hyphens become a single
    hyphen.  The result is cut to 50 characters.  Names with nothing
    usable left produce ``"business"``.

    >>> slugify("Salão  da Maria!")
    'salao-da-maria'
    """
    text = unicodedata.normalize("NFD", name.lower())
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = re.sub(r"[^a-z0-9\s-]", "", text).strip()
    text = re.sub(r"\s+", "-", text)
    text = re.sub(r"-+", "-", text)
    text = text[:SLUG_MAX_LENGTH]
    return text or DEFAULT_SLUG


class ProfileService:
    """Service class for the caller's profile."""

    @classmethod
    async def get_profile(cls, owner_id: str) -> Optional[ProfileRead]:
        """Return the caller's profile or ``None`` if it was never saved."""
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM profiles WHERE id = ?", (owner_id,)).fetchone()
            return cls._row_to_profile_read(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def profile_exists(cls, owner_id: str) -> bool:
        conn = get_connection()
        try:
            row = conn.execute("SELECT 1 FROM profiles WHERE id = ?", (owner_id,)).fetchone()
            return row is not None
        finally:
            conn.close()

    @classmethod
    async def save_profile(cls, owner_id: str, data: ProfileUpdate) -> ProfileRead:
        """Create the caller's profile or rename the existing one."""
        with transaction() as conn:
            existing = conn.execute("SELECT id FROM profiles WHERE id = ?", (owner_id,)).fetchone()
            if existing:
                conn.execute(
                    "UPDATE profiles SET business_name = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    (data.business_name, owner_id),
                )
                logger.info("Updated profile %s", owner_id)
            else:
                slug = cls._unique_slug(conn, slugify(data.business_name))
                conn.execute(
                    "INSERT INTO profiles (id, business_name, unique_slug) VALUES (?, ?, ?)",
                    (owner_id, data.business_name, slug),
                )
                logger.info("Created profile %s with slug %s", owner_id, slug)
            row = conn.execute("SELECT * FROM profiles WHERE id = ?", (owner_id,)).fetchone()
            return cls._row_to_profile_read(row)

    @staticmethod
    def _unique_slug(conn: sqlite3.Connection, base: str) -> str:
        """Return ``base`` or the first free ``base-N`` (N = 1, 2, …)."""
        slug = base
        counter = 1
        while conn.execute("SELECT 1 FROM profiles WHERE unique_slug = ?", (slug,)).fetchone():
            slug = f"{base}-{counter}"
            counter += 1
        return slug

    @staticmethod
    def _row_to_profile_read(row: sqlite3.Row) -> ProfileRead:
        return ProfileRead(
            id=row["id"],
            business_name=row["business_name"],
            unique_slug=row["unique_slug"],
            created_at=str(row["created_at"]),
            updated_at=str(row["updated_at"]),
        )
