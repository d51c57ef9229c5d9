"""
User registration, session teardown and profile management
"""
import logging
import re

from flask import current_app

import auth
from constants import (
    ACCESS_TOKEN_COOKIE,
    NICKNAME_MAX_LENGTH,
    NICKNAME_PATTERN,
    REFRESH_TOKEN_COOKIE,
)
from converters import user_converter
from db import transactional
from exceptions import (
    ErrorStatus,
    GeneralException,
    TokenErrorStatus,
    TokenException,
    UserErrorStatus,
    UserException,
)
from models.refreshtoken import RefreshToken
from models.user import Status
from repositories.record_repository import RecordRepository
from repositories.refreshtoken_repository import RefreshTokenRepository
from repositories.user_repository import UserRepository

logger = logging.getLogger("main")

_nickname_re = re.compile(NICKNAME_PATTERN, re.ASCII)


@transactional
def register_user(response, register_token, nick_name, status):
    """
    Create a user from a registration token and start its session.

    Sets the accessToken and refreshToken cookies on `response`.
    """
    validate_register_token(register_token)
    validate_nick_name(nick_name)
    user_status = resolve_status(status)

    provider_id = auth.get_provider_id_from_token(register_token)
    check_exist_user(provider_id)

    user = UserRepository.save(user_converter.to_user_entity(provider_id, nick_name, user_status))
    issue_tokens(response, user)

    logger.info(f"Registered user {user.id}")
    return user_converter.to_user_dto(user)


@transactional
def logout_user(request, response):
    delete_refresh_token(request)
    delete_token_cookies(response)


@transactional
def delete_user(request, response, user_id):
    UserRepository.delete_by_id(user_id)

    delete_refresh_token(request)
    delete_token_cookies(response)
    logger.info(f"Deleted user {user_id}")


@transactional
def update_user(user_id, nick_name=None, status=None):
    user = get_user(user_id)

    if nick_name is not None:
        validate_nick_name(nick_name)
        user.nick_name = nick_name

    if status is not None:
        user.status = resolve_status(status)

    UserRepository.save(user)
    return user_converter.to_user_dto(user)


@transactional
def get_user_info(user_id):
    user = get_user(user_id)
    return user_converter.to_user_info_dto(user, get_record_count(user))


def get_record_count(user):
    """Records of the user, not counting the temporary memo/chat placeholders"""
    record_count = RecordRepository.get_record_count(user.id)
    if user.tmp_chat is not None:
        record_count -= 1
    if user.tmp_memo is not None:
        record_count -= 1
    return record_count


def get_user(user_id):
    user = UserRepository.get_by_id(user_id)
    if user is None:
        raise GeneralException(ErrorStatus.UNAUTHORIZED)
    return user


# ===== Tokens & cookies =====

def issue_tokens(response, user):
    """Generate access + refresh tokens, store the refresh token and set both cookies"""
    refresh_token = auth.generate_refresh_token(user.id)
    save_refresh_token(refresh_token, user.id)

    set_token_cookies(response, ACCESS_TOKEN_COOKIE, auth.generate_access_token(user.id))
    set_token_cookies(response, REFRESH_TOKEN_COOKIE, refresh_token)


def save_refresh_token(refresh_token, user_id):
    RefreshTokenRepository.save(
        RefreshToken.of(refresh_token, user_id),
        current_app.config["REFRESH_TOKEN_EXPIRATION"],
    )


def set_token_cookies(response, token_name, token):
    if token_name == ACCESS_TOKEN_COOKIE:
        max_age = current_app.config["ACCESS_TOKEN_EXPIRATION"]
    else:
        max_age = current_app.config["REFRESH_TOKEN_EXPIRATION"]
    auth.set_token_cookie(response, token_name, token, max_age)


def delete_token_cookies(response):
    auth.delete_token_cookie(response, ACCESS_TOKEN_COOKIE)
    auth.delete_token_cookie(response, REFRESH_TOKEN_COOKIE)


def delete_refresh_token(request):
    refresh_token = RefreshTokenRepository.find_by_refresh_token(
        auth.get_cookie_value(request, REFRESH_TOKEN_COOKIE)
    )
    if refresh_token is not None:
        RefreshTokenRepository.delete(refresh_token)


# ===== Validation =====

def check_exist_user(provider_id):
    if UserRepository.exists_by_provider_id(provider_id):
        raise UserException(UserErrorStatus.ALREADY_EXIST_USER)


def validate_nick_name(nick_name):
    if not isinstance(nick_name, str) or not nick_name or len(nick_name) > NICKNAME_MAX_LENGTH:
        raise UserException(UserErrorStatus.INVALID_USER_NICKNAME)

    if not _nickname_re.fullmatch(nick_name):
        raise UserException(UserErrorStatus.INVALID_USER_NICKNAME)


def resolve_status(status):
    user_status = Status.from_label(status)
    if user_status is None:
        raise UserException(UserErrorStatus.INVALID_USER_STATUS)
    return user_status


def validate_register_token(register_token):
    if not auth.is_register_token_valid(register_token):
        raise TokenException(TokenErrorStatus.INVALID_REGISTER_TOKEN)
