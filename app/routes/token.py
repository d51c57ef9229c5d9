"""
Token Routes - login, access token reissue and development tokens
"""

from flask import Blueprint, Response, abort, current_app, request

from api_responses import SuccessStatus, get_json_body, int_field, success_response
from auth import limiter
from services import token_service

token_bp = Blueprint("token", __name__, url_prefix="/api/token")


@token_bp.route("/login", methods=["POST"])
@limiter.limit("20 per minute")
def login():
    """Log in with the identity provider account id resolved by the client"""
    body = get_json_body("providerId")
    response = Response()
    login_dto = token_service.login_with_provider(response, str(body["providerId"]))
    return success_response(SuccessStatus.LOGIN_SUCCESS, login_dto, response)


@token_bp.route("/reissue", methods=["POST"])
@limiter.limit("30 per minute")
def reissue():
    response = Response()
    token_service.reissue_access_token(request, response)
    return success_response(SuccessStatus.ACCESS_TOKEN_REISSUE_SUCCESS, response=response)


@token_bp.route("/tmp", methods=["POST"])
def issue_tmp_token():
    """Long-lived access token for a given user; only served when enabled"""
    if not current_app.config.get("TMP_TOKEN_ENABLED"):
        abort(404)
    body = get_json_body("userId")
    token = token_service.issue_tmp_token(int_field(body, "userId"))
    return success_response(SuccessStatus.TMP_TOKEN_ISSUE_SUCCESS, {"accessToken": token})
