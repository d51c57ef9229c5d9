"""
Folder Routes
"""

from flask import Blueprint
from flask_login import current_user, login_required

from api_responses import SuccessStatus, get_json_body, int_field, success_response
from services import folder_service

folder_bp = Blueprint("folder", __name__, url_prefix="/api/folders")


@folder_bp.route("", methods=["POST"])
@login_required
def create_folder():
    body = get_json_body("title")
    folder_list = folder_service.create_folder(current_user.id, body["title"])
    return success_response(SuccessStatus.FOLDER_CREATE_SUCCESS, folder_list)


@folder_bp.route("", methods=["PATCH"])
@login_required
def update_folder():
    body = get_json_body("folderId", "title")
    folder_list = folder_service.update_folder(current_user.id, int_field(body, "folderId"), body["title"])
    return success_response(SuccessStatus.FOLDER_UPDATE_SUCCESS, folder_list)


@folder_bp.route("/<int:folder_id>", methods=["DELETE"])
@login_required
def delete_folder(folder_id):
    folder_list = folder_service.delete_folder(current_user.id, folder_id)
    return success_response(SuccessStatus.FOLDER_DELETE_SUCCESS, folder_list)


@folder_bp.route("", methods=["GET"])
@login_required
def get_folder_list():
    return success_response(SuccessStatus.GET_FOLDER_LIST_SUCCESS, folder_service.get_folder_list(current_user.id))
