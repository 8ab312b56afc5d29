"""
repositories/property_repo.py
------------------------------
Data access layer for rental properties.
All SQL queries related to the `properties` table live here, including the
filtered search assembled by `build_search_query`.
"""

from typing import Optional

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import fetch_rows
from models.property import Property, PropertySearchOptions
from utils.logger import get_logger

logger = get_logger(__name__)

_SEARCH_BASE_SQL = """
    SELECT properties.*, AVG(rating) AS average_rating
    FROM properties
    LEFT JOIN property_reviews ON properties.id = property_id"""


def build_search_query(
    options: Optional[PropertySearchOptions] = None, limit: Optional[int] = DEFAULT_RESULT_LIMIT
) -> tuple[str, list]:
    """
    Assemble the property search SQL and its parameters.

    Filters are added in a fixed order (owner, city, minimum price, maximum
    price) and only when truthy. Prices are in dollars and compared
    against cost_per_night / 100. The rating filter goes in HAVING since it
    applies to the aggregated average.

    Args:
        options: Search filters; None searches everything.
        limit: Maximum number of rows; falsy means no ORDER BY / LIMIT.

    Returns:
        (sql, params) with one %s placeholder per param, in order.
    """
    options = options or PropertySearchOptions()
    params: list = []
    conditions: list[str] = []

    if options.owner_id:
        params.append(options.owner_id)
        conditions.append("owner_id = %s")

    if options.city:
        params.append(f"%{options.city}%".lower())
        conditions.append("LOWER(city) LIKE %s")

    if options.minimum_price_per_night:
        params.append(options.minimum_price_per_night)
        conditions.append("(cost_per_night / 100) >= %s")

    if options.maximum_price_per_night:
        params.append(options.maximum_price_per_night)
        conditions.append("(cost_per_night / 100) <= %s")

    sql = _SEARCH_BASE_SQL
    if conditions:
        sql += "\nWHERE " + "\nAND ".join(conditions)

    sql += "\nGROUP BY properties.id"

    if options.minimum_rating:
        params.append(options.minimum_rating)
        sql += "\nHAVING AVG(rating) >= %s"

    if limit:
        params.append(limit)
        sql += "\nORDER BY cost_per_night\nLIMIT %s"

    return sql + ";", params


class PropertyRepository:
    """Repository for search and inserts on the properties table."""

    # ── READ ──────────────────────────────────────────────

    def get_all(
        self,
        options: Optional[PropertySearchOptions] = None,
        limit: Optional[int] = DEFAULT_RESULT_LIMIT,
    ) -> Optional[list[dict]]:
        """
        Search properties, cheapest first, each with its average rating.

        Args:
            options: Search filters (see PropertySearchOptions).
            limit: Maximum number of rows to return.

        Returns:
            List of rows, or None if the query failed.
        """
        sql, params = build_search_query(options, limit)
        try:
            return fetch_rows(sql, params)
        except psycopg2.Error as e:
            logger.error(f"Failed to search properties: {e}")
            return None

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Optional[dict]:
        """
        Insert a new property listing.

        Args:
            prop: The Property to persist; cost_per_night is in dollars.

        Returns:
            The inserted row, or None if the insert failed.
        """
        sql = """
            INSERT INTO properties (
                owner_id, title, description, thumbnail_photo_url, cover_photo_url,
                cost_per_night, street, city, province, post_code, country,
                parking_spaces, number_of_bathrooms, number_of_bedrooms
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING *;
        """
        try:
            rows = fetch_rows(sql, (
                prop.owner_id, prop.title, prop.description,
                prop.thumbnail_photo_url, prop.cover_photo_url,
                prop.cost_per_night_cents, prop.street, prop.city,
                prop.province, prop.post_code, prop.country,
                prop.parking_spaces or 0,
                prop.number_of_bathrooms or 0,
                prop.number_of_bedrooms or 0,
            ))
        except psycopg2.Error as e:
            logger.error(f"Failed to add property '{prop.title}': {e}")
            return None
        logger.info(f"Added new property #{rows[0]['id']} for owner {prop.owner_id}: {rows[0]}")
        return rows[0]
