"""
Record Routes - memo and chat records, temporary memo and record lists
"""

from flask import Blueprint, request
from flask_login import current_user, login_required

from api_responses import SuccessStatus, get_json_body, int_field, success_response
from services import record_service

record_bp = Blueprint("record", __name__, url_prefix="/api/records")


@record_bp.route("/memo", methods=["POST"])
@login_required
def create_memo_record():
    body = get_json_body("title", "content", "folderId")
    analysis_dto = record_service.create_memo_record(
        current_user.id, body["title"], body["content"], int_field(body, "folderId")
    )
    return success_response(SuccessStatus.RECORD_CREATE_SUCCESS, analysis_dto)


@record_bp.route("/chat", methods=["POST"])
@login_required
def create_chat_record():
    body = get_json_body("title", "chatRoomId", "folderId")
    analysis_dto = record_service.create_chat_record(
        current_user.id, body["title"], int_field(body, "chatRoomId"), int_field(body, "folderId")
    )
    return success_response(SuccessStatus.RECORD_CREATE_SUCCESS, analysis_dto)


@record_bp.route("/memo/<int:record_id>", methods=["GET"])
@login_required
def get_memo_record(record_id):
    return success_response(SuccessStatus.GET_RECORD_SUCCESS, record_service.get_memo_record(current_user.id, record_id))


@record_bp.route("/memo/tmp", methods=["POST"])
@login_required
def save_tmp_memo():
    body = get_json_body()
    record_service.save_tmp_memo(current_user.id, body.get("title"), body.get("content"))
    return success_response(SuccessStatus.TMP_MEMO_SAVE_SUCCESS)


@record_bp.route("/memo/tmp", methods=["GET"])
@login_required
def get_tmp_memo():
    return success_response(SuccessStatus.GET_TMP_MEMO_SUCCESS, record_service.get_tmp_memo(current_user.id))


@record_bp.route("/folder", methods=["PATCH"])
@login_required
def update_folder():
    body = get_json_body("recordId", "folder")
    record_service.update_folder(current_user.id, int_field(body, "recordId"), body["folder"])
    return success_response(SuccessStatus.RECORD_FOLDER_UPDATE_SUCCESS)


@record_bp.route("", methods=["GET"])
@login_required
def get_record_list():
    """?folderId= narrows the list to one folder, ?lastRecordId= pages"""
    record_list = record_service.get_record_list(
        current_user.id,
        request.args.get("folderId", None, type=int),
        request.args.get("lastRecordId", 0, type=int),
    )
    return success_response(SuccessStatus.GET_RECORD_LIST_SUCCESS, record_list)


@record_bp.route("/keyword", methods=["GET"])
@login_required
def get_keyword_record_list():
    record_list = record_service.get_keyword_record_list(
        current_user.id,
        request.args.get("keyword", ""),
        request.args.get("lastRecordId", 0, type=int),
    )
    return success_response(SuccessStatus.GET_RECORD_LIST_SUCCESS, record_list)


@record_bp.route("/recent", methods=["GET"])
@login_required
def get_recent_record_list():
    return success_response(SuccessStatus.GET_RECORD_LIST_SUCCESS, record_service.get_recent_record_list(current_user.id))
