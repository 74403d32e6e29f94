"""
Service layer for the services a business offers.

Provides CRUD operations over the ``services`` table.  All statements
filter on ``profile_id`` with the caller identity, so a service that
belongs to another tenant behaves exactly like one that does not exist:
reads return ``None`` and updates or deletes affect no rows.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from scheduling_admin_api.app.core.db import get_connection, transaction
from scheduling_admin_api.app.schemas.service import ServiceCreate, ServiceRead

logger = logging.getLogger(__name__)

# SQLite integers are signed 64-bit; larger ids cannot be bound.
MAX_ROW_ID = 2**63 - 1


class CatalogService:
    """Service class for managing a profile's offered services."""

    @classmethod
    async def list_services(cls, owner_id: str) -> List[ServiceRead]:
        """Return the caller's services, newest first."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT * FROM services WHERE profile_id = ? ORDER BY created_at DESC, id DESC",
                (owner_id,),
            ).fetchall()
            return [cls._row_to_service_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_service(cls, owner_id: str, service_id: int) -> Optional[ServiceRead]:
        if not cls._valid_id(service_id):
            return None
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM services WHERE id = ? AND profile_id = ?",
                (service_id, owner_id),
            ).fetchone()
            return cls._row_to_service_read(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def create_service(cls, owner_id: str, data: ServiceCreate) -> ServiceRead:
        """Insert a new service owned by the caller and return it.

        The caller's profile must exist; the foreign key rejects the
        insert otherwise, so endpoints check first.
        """
        with transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO services (profile_id, name, duration) VALUES (?, ?, ?)",
                (owner_id, data.name, data.duration),
            )
            service_id = cursor.lastrowid
            row = conn.execute("SELECT * FROM services WHERE id = ?", (service_id,)).fetchone()
        logger.info("Created service %s for profile %s", service_id, owner_id)
        return cls._row_to_service_read(row)

    @classmethod
    async def update_service(cls, owner_id: str, service_id: int, data: ServiceCreate) -> Optional[ServiceRead]:
        """Replace name and duration of one of the caller's services.

        Returns the updated service, or ``None`` if the caller owns no
        service with that ID.
        """
        if not cls._valid_id(service_id):
            return None
        with transaction() as conn:
            cursor = conn.execute(
                """
                UPDATE services
                SET name = ?, duration = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ? AND profile_id = ?
                """,
                (data.name, data.duration, service_id, owner_id),
            )
            if cursor.rowcount == 0:
                return None
            row = conn.execute("SELECT * FROM services WHERE id = ?", (service_id,)).fetchone()
        logger.info("Updated service %s for profile %s", service_id, owner_id)
        return cls._row_to_service_read(row)

    @classmethod
    async def delete_service(cls, owner_id: str, service_id: int) -> bool:
        """Delete one of the caller's services.

        Returns ``True`` if a row was deleted, ``False`` otherwise.
        """
        if not cls._valid_id(service_id):
            return False
        with transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM services WHERE id = ? AND profile_id = ?",
                (service_id, owner_id),
            )
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted service %s for profile %s", service_id, owner_id)
        return affected > 0

    @staticmethod
    def _valid_id(service_id: int) -> bool:
        return 1 <= service_id <= MAX_ROW_ID

    @staticmethod
    def _row_to_service_read(row: sqlite3.Row) -> ServiceRead:
        return ServiceRead(
            id=row["id"],
            profile_id=row["profile_id"],
            name=row["name"],
            duration=row["duration"],
            created_at=str(row["created_at"]),
            updated_at=str(row["updated_at"]),
        )
