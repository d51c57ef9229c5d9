"""
Chat Routes
"""

from flask import Blueprint
from flask_login import current_user, login_required

from api_responses import SuccessStatus, get_json_body, success_response
from services import chat_service

chat_bp = Blueprint("chat", __name__, url_prefix="/api/chat")


@chat_bp.route("", methods=["POST"])
@login_required
def create_chat_room():
    return success_response(SuccessStatus.CHAT_ROOM_CREATE_SUCCESS, chat_service.create_chat_room(current_user.id))


@chat_bp.route("/<int:chat_room_id>", methods=["POST"])
@login_required
def create_chat(chat_room_id):
    body = get_json_body("content")
    chats = chat_service.create_chat(current_user.id, chat_room_id, body["content"])
    return success_response(SuccessStatus.CHAT_CREATE_SUCCESS, chats)


@chat_bp.route("/<int:chat_room_id>", methods=["GET"])
@login_required
def get_chat_list(chat_room_id):
    return success_response(SuccessStatus.GET_CHAT_SUCCESS, chat_service.get_chat_list(current_user.id, chat_room_id))


@chat_bp.route("/<int:chat_room_id>", methods=["DELETE"])
@login_required
def delete_chat_room(chat_room_id):
    chat_service.delete_chat_room(current_user.id, chat_room_id)
    return success_response(SuccessStatus.CHAT_DELETE_SUCCESS)


@chat_bp.route("/<int:chat_room_id>/summary", methods=["GET"])
@login_required
def get_chat_summary(chat_room_id):
    summary = chat_service.get_chat_summary(current_user.id, chat_room_id)
    return success_response(SuccessStatus.GET_CHAT_SUMMARY_SUCCESS, summary)


@chat_bp.route("/<int:chat_room_id>/tmp", methods=["POST"])
@login_required
def save_tmp_chat(chat_room_id):
    chat_service.save_tmp_chat(current_user.id, chat_room_id)
    return success_response(SuccessStatus.TMP_CHAT_SAVE_SUCCESS)


@chat_bp.route("/tmp", methods=["GET"])
@login_required
def get_tmp_chat():
    return success_response(SuccessStatus.GET_TMP_CHAT_SUCCESS, chat_service.get_tmp_chat(current_user.id))
