"""
models/user.py
--------------
Domain model for LightBnB accounts.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class User:
    """
    Represents a user account (guest or property owner).

    Attributes:
        name: Display name.
        email: Login email; stored lowercased.
        password: Already-hashed password. Hashing happens before this layer.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """
        Build a User from a sign-up form payload.

        Raises:
            KeyError: If name, email or password is missing.
        """
        return cls(
            name=data["name"],
            email=data["email"],
            password=data["password"],
            id=data.get("id"),
        )

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
