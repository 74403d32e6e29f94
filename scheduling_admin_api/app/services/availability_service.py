"""
Service layer for weekly availability.

A profile's availability is always written as a whole: the submitted
list replaces every existing window.  Delete and insert run in one
transaction, so a failure half way leaves the previous set in place and
concurrent readers never see an empty intermediate state.  Two writers
for the same profile are serialized by SQLite; the later commit wins.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from scheduling_admin_api.app.core.db import get_connection, transaction
from scheduling_admin_api.app.schemas.availability import AvailabilityCreate, AvailabilityRead

logger = logging.getLogger(__name__)

_SELECT_FOR_OWNER = (
    "SELECT * FROM availabilities WHERE profile_id = ? "
    "ORDER BY day_of_week ASC, start_time ASC, id ASC"
)


class AvailabilityService:
    """Service class for reading and replacing availability windows."""

    @classmethod
    async def list_availabilities(cls, owner_id: str) -> List[AvailabilityRead]:
        """Return the caller's windows ordered by weekday, then start time."""
        conn = get_connection()
        try:
            rows = conn.execute(_SELECT_FOR_OWNER, (owner_id,)).fetchall()
            return [cls._row_to_availability_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def replace_availabilities(
        cls, owner_id: str, items: List[AvailabilityCreate]
    ) -> List[AvailabilityRead]:
        """Atomically replace the caller's windows with ``items``.

        An empty ``items`` clears the schedule.  Returns the stored set in
        the same order as ``list_availabilities``.
        """
        with transaction() as conn:
            deleted = conn.execute(
                "DELETE FROM availabilities WHERE profile_id = ?", (owner_id,)
            ).rowcount
            if items:
                conn.executemany(
                    """
                    INSERT INTO availabilities (profile_id, day_of_week, start_time, end_time)
                    VALUES (?, ?, ?, ?)
                    """,
                    [(owner_id, item.day_of_week, item.start_time, item.end_time) for item in items],
                )
            rows = conn.execute(_SELECT_FOR_OWNER, (owner_id,)).fetchall()
        logger.info(
            "Replaced availability for profile %s (%d removed, %d added)",
            owner_id,
            deleted,
            len(items),
        )
        return [cls._row_to_availability_read(row) for row in rows]

    @staticmethod
    def _row_to_availability_read(row: sqlite3.Row) -> AvailabilityRead:
        return AvailabilityRead(
            id=row["id"],
            profile_id=row["profile_id"],
            day_of_week=row["day_of_week"],
            start_time=row["start_time"],
            end_time=row["end_time"],
            created_at=str(row["created_at"]),
        )
