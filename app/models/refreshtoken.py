"""
Model: RefreshToken

Stored in Redis, not in the relational database.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RefreshToken:
    refresh_token: str
    user_id: int

    @classmethod
    def of(cls, refresh_token, user_id):
        return cls(refresh_token=refresh_token, user_id=int(user_id))
