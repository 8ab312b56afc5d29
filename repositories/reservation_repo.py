"""
repositories/reservation_repo.py
---------------------------------
Data access layer for a guest's reservations.
"""

from typing import Optional

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import fetch_rows
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for read queries on the reservations table."""

    def get_all_for_guest(
        self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT
    ) -> Optional[list[dict]]:
        """
        Fetch a guest's reservations with the reserved property and its
        average rating, most recent stay first.

        Each row merges reservation and property columns. Where both tables
        share a column name (id), the property value wins.

        Args:
            guest_id: ID of the user who made the reservations.
            limit: Maximum number of rows to return.

        Returns:
            List of rows, or None if the query failed.
        """
        sql = """
            SELECT reservations.*, properties.*, avg(rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date DESC
            LIMIT %s;
        """
        try:
            return fetch_rows(sql, (guest_id, limit))
        except psycopg2.Error as e:
            logger.error(f"Failed to get reservations for guest #{guest_id}: {e}")
            return None
