"""
User Routes - registration, logout, withdrawal and profile
"""

from flask import Blueprint, Response, request
from flask_login import current_user, login_required

from api_responses import SuccessStatus, get_json_body, str_field, success_response
from auth import limiter
from services import user_service

user_bp = Blueprint("user", __name__, url_prefix="/api/users")


@user_bp.route("/register", methods=["POST"])
@limiter.limit("10 per minute")
def register():
    """Finish sign up with the register token handed out at login"""
    body = get_json_body("registerToken", "nickName", "status")
    response = Response()
    user_dto = user_service.register_user(response, str_field(body, "registerToken"), body["nickName"], body["status"])
    return success_response(SuccessStatus.USER_REGISTER_SUCCESS, user_dto, response)


@user_bp.route("/logout", methods=["POST"])
def logout():
    response = Response()
    user_service.logout_user(request, response)
    return success_response(SuccessStatus.USER_LOGOUT_SUCCESS, response=response)


@user_bp.route("", methods=["DELETE"])
@login_required
def delete_user():
    user_id = current_user.id
    response = Response()
    user_service.delete_user(request, response, user_id)
    return success_response(SuccessStatus.USER_DELETE_SUCCESS, response=response)


@user_bp.route("/info", methods=["PATCH"])
@login_required
def update_user():
    body = get_json_body()
    user_dto = user_service.update_user(current_user.id, body.get("nickName"), body.get("status"))
    return success_response(SuccessStatus.USER_UPDATE_SUCCESS, user_dto)


@user_bp.route("/info", methods=["GET"])
@login_required
def get_user_info():
    return success_response(SuccessStatus.GET_USER_INFO_SUCCESS, user_service.get_user_info(current_user.id))
