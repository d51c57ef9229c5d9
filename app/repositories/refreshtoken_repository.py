"""
Repository for RefreshToken (Redis)

Key layout: refreshToken:<token> -> user id, expiring with the token.
"""

import logging

from constants import REFRESH_TOKEN_KEY_PREFIX
from models.refreshtoken import RefreshToken
from redis_client import get_redis

logger = logging.getLogger("main")


def _key(refresh_token):
    return f"{REFRESH_TOKEN_KEY_PREFIX}:{refresh_token}"


class RefreshTokenRepository:
    """Repository for refresh tokens kept in Redis"""

    @staticmethod
    def save(refresh_token: RefreshToken, ttl: int):
        get_redis().setex(_key(refresh_token.refresh_token), ttl, str(refresh_token.user_id))
        logger.debug(f"Refresh token stored for user {refresh_token.user_id} (TTL: {ttl}s)")
        return refresh_token

    @staticmethod
    def find_by_refresh_token(refresh_token):
        if not refresh_token:
            return None
        user_id = get_redis().get(_key(refresh_token))
        if user_id is None:
            return None
        if isinstance(user_id, bytes):
            user_id = user_id.decode()
        return RefreshToken.of(refresh_token, user_id)

    @staticmethod
    def delete(refresh_token: RefreshToken):
        deleted = get_redis().delete(_key(refresh_token.refresh_token))
        if deleted:
            logger.debug(f"Refresh token deleted for user {refresh_token.user_id}")
        return deleted > 0
