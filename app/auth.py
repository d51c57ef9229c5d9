"""
Authentication plumbing: JWT issue/verify, token cookies and the
Flask-Login request loader that authenticates requests from the
accessToken cookie.
"""
import datetime
import logging
import uuid

import jwt
from flask import current_app, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_login import LoginManager

from constants import (
    ACCESS_TOKEN_COOKIE,
    TOKEN_TYPE_ACCESS,
    TOKEN_TYPE_REFRESH,
    TOKEN_TYPE_REGISTER,
)
from exceptions import TokenErrorStatus, error_body, json_error, unauthorized_response
from repositories.user_repository import UserRepository

# Retrieve main logger
logger = logging.getLogger("main")

login_manager = LoginManager()
limiter = Limiter(key_func=get_remote_address, default_limits=["300 per day", "100 per hour"])


# ===== JWT =====

def _encode(claims, expires_in):
    config = current_app.config
    now = datetime.datetime.now(datetime.timezone.utc)
    payload = {
        **claims,
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": now + datetime.timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, config["JWT_SECRET"], algorithm=config["JWT_ALGORITHM"])


def _decode(token, token_type):
    """Return the claims of a valid token of the given type, None otherwise"""
    if not token:
        return None
    config = current_app.config
    try:
        claims = jwt.decode(token, config["JWT_SECRET"], algorithms=[config["JWT_ALGORITHM"]])
    except jwt.ExpiredSignatureError:
        logger.info(f"Expired {token_type} token")
        return None
    except jwt.PyJWTError as e:
        logger.warning(f"Invalid {token_type} token: {e}")
        return None
    if claims.get("type") != token_type:
        logger.warning(f"Token type mismatch: expected {token_type}, got {claims.get('type')}")
        return None
    return claims


def generate_access_token(user_id):
    return _encode(
        {"userId": str(user_id), "type": TOKEN_TYPE_ACCESS},
        current_app.config["ACCESS_TOKEN_EXPIRATION"],
    )


def generate_tmp_token(user_id):
    """Long-lived access token for development clients"""
    return _encode(
        {"userId": str(user_id), "type": TOKEN_TYPE_ACCESS},
        current_app.config["TMP_TOKEN_EXPIRATION"],
    )


def generate_refresh_token(user_id):
    return _encode(
        {"userId": str(user_id), "type": TOKEN_TYPE_REFRESH},
        current_app.config["REFRESH_TOKEN_EXPIRATION"],
    )


def generate_register_token(provider_id):
    return _encode(
        {"providerId": provider_id, "type": TOKEN_TYPE_REGISTER},
        current_app.config["REGISTER_TOKEN_EXPIRATION"],
    )


def is_access_token_valid(token):
    return _decode(token, TOKEN_TYPE_ACCESS) is not None


def is_refresh_token_valid(token):
    return _decode(token, TOKEN_TYPE_REFRESH) is not None


def is_register_token_valid(token):
    return _decode(token, TOKEN_TYPE_REGISTER) is not None


def get_user_id_from_access_token(token):
    claims = _decode(token, TOKEN_TYPE_ACCESS)
    return int(claims["userId"]) if claims else None


def get_user_id_from_refresh_token(token):
    claims = _decode(token, TOKEN_TYPE_REFRESH)
    return int(claims["userId"]) if claims else None


def get_provider_id_from_token(register_token):
    claims = _decode(register_token, TOKEN_TYPE_REGISTER)
    return claims["providerId"] if claims else None


# ===== Cookies =====

def set_token_cookie(response, name, token, max_age):
    config = current_app.config
    response.set_cookie(
        name,
        token,
        max_age=max_age,
        path="/",
        domain=config.get("COOKIE_DOMAIN"),
        secure=config["COOKIE_SECURE"],
        httponly=True,
        samesite=config["COOKIE_SAMESITE"],
    )


def delete_token_cookie(response, name):
    config = current_app.config
    response.set_cookie(
        name,
        "",
        max_age=0,
        expires=0,
        path="/",
        domain=config.get("COOKIE_DOMAIN"),
        secure=config["COOKIE_SECURE"],
        httponly=True,
        samesite=config["COOKIE_SAMESITE"],
    )


def get_cookie_value(req, name):
    return req.cookies.get(name)


# ===== Flask-Login =====

def _token_from_request(req):
    token = get_cookie_value(req, ACCESS_TOKEN_COOKIE)
    if token:
        return token
    auth_header = req.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1]
    return None


@login_manager.request_loader
def load_user_from_request(req):
    user_id = get_user_id_from_access_token(_token_from_request(req))
    if user_id is None:
        return None
    return UserRepository.get_by_id(user_id)


@login_manager.unauthorized_handler
def unauthorized_json():
    if _token_from_request(request):
        logger.info(f"Rejected access token on {request.path}")
        return json_error(error_body(TokenErrorStatus.INVALID_ACCESS_TOKEN), 401)
    logger.info(f"Unauthorized request to {request.path}")
    return unauthorized_response()
