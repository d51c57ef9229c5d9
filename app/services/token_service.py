"""
Login, refresh token rotation and development tokens
"""
import logging

import auth
from constants import ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE
from converters import user_converter
from db import transactional
from exceptions import TokenErrorStatus, TokenException
from repositories.refreshtoken_repository import RefreshTokenRepository
from repositories.user_repository import UserRepository
from services import user_service

logger = logging.getLogger("main")


@transactional
def login_with_provider(response, provider_id):
    """
    Log in the user bound to an identity provider account.

    Unknown accounts get a short-lived registration token instead of a
    session; the client finishes sign up with it.
    """
    user = UserRepository.get_by_provider_id(provider_id)
    if user is None:
        logger.info("Login from unregistered provider account, issuing register token")
        return user_converter.LoginDto(
            registered=False,
            register_token=auth.generate_register_token(provider_id),
        )

    user_service.issue_tokens(response, user)
    logger.info(f"User {user.id} logged in")
    return user_converter.LoginDto(registered=True)


def reissue_access_token(request, response):
    refresh_token = auth.get_cookie_value(request, REFRESH_TOKEN_COOKIE)
    if not auth.is_refresh_token_valid(refresh_token):
        raise TokenException(TokenErrorStatus.INVALID_REFRESH_TOKEN)

    stored = RefreshTokenRepository.find_by_refresh_token(refresh_token)
    if stored is None:
        raise TokenException(TokenErrorStatus.REFRESH_TOKEN_NOT_FOUND)

    user_id = auth.get_user_id_from_refresh_token(refresh_token)
    if user_id != stored.user_id:
        raise TokenException(TokenErrorStatus.INVALID_REFRESH_TOKEN)

    # Rotation: the presented refresh token is single use
    RefreshTokenRepository.delete(stored)
    new_refresh_token = auth.generate_refresh_token(user_id)
    user_service.save_refresh_token(new_refresh_token, user_id)

    user_service.set_token_cookies(response, ACCESS_TOKEN_COOKIE, auth.generate_access_token(user_id))
    user_service.set_token_cookies(response, REFRESH_TOKEN_COOKIE, new_refresh_token)
    logger.info(f"Reissued tokens for user {user_id}")


@transactional
def issue_tmp_token(user_id):
    user = user_service.get_user(user_id)
    return auth.generate_tmp_token(user.id)
