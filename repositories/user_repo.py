"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

import psycopg2

from db.connection import fetch_rows
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    def get_by_email(self, email: str) -> Optional[dict]:
        """
        Fetch a single user by email. The match is case-insensitive
        because emails are stored lowercased.

        Args:
            email: The email address to look up.

        Returns:
            User row or None (also None if the query failed).
        """
        sql = "SELECT * FROM users WHERE email = %s;"
        try:
            rows = fetch_rows(sql, (email.lower(),))
        except psycopg2.Error as e:
            logger.error(f"Failed to get user by email: {e}")
            return None
        return rows[0] if rows else None

    def get_by_id(self, user_id: int) -> Optional[dict]:
        """
        Fetch a single user by primary key.

        Returns:
            User row or None (also None if the query failed).
        """
        sql = "SELECT * FROM users WHERE id = %s;"
        try:
            rows = fetch_rows(sql, (user_id,))
        except psycopg2.Error as e:
            logger.error(f"Failed to get user #{user_id}: {e}")
            return None
        return rows[0] if rows else None

    def add(self, user: User) -> Optional[dict]:
        """
        Insert a new user.

        Args:
            user: The User to persist. Its password must already be hashed.

        Returns:
            The inserted row, or None if the insert failed.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        try:
            rows = fetch_rows(sql, (user.name, user.email.lower(), user.password))
        except psycopg2.Error as e:
            logger.error(f"Failed to add user {user.email}: {e}")
            return None
        logger.info(f"Added new user #{rows[0]['id']}")
        return rows[0]
