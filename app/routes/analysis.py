"""
Analysis Routes
"""

from flask import Blueprint
from flask_login import current_user, login_required

from api_responses import SuccessStatus, get_json_body, int_field, success_response
from services import analysis_service

analysis_bp = Blueprint("analysis", __name__, url_prefix="/api/analysis")


@analysis_bp.route("/<int:analysis_id>", methods=["POST"])
@login_required
def recreate_analysis(analysis_id):
    analysis_dto = analysis_service.recreate_analysis(current_user.id, analysis_id)
    return success_response(SuccessStatus.ANALYSIS_CREATE_SUCCESS, analysis_dto)


@analysis_bp.route("/<int:analysis_id>", methods=["GET"])
@login_required
def get_analysis(analysis_id):
    return success_response(SuccessStatus.GET_ANALYSIS_SUCCESS, analysis_service.get_analysis(current_user.id, analysis_id))


@analysis_bp.route("", methods=["PATCH"])
@login_required
def update_analysis():
    """Body: {"analysisId", "comment"?, "abilityMap"?: {keyword label: content}}"""
    body = get_json_body("analysisId")
    analysis_dto = analysis_service.update_analysis(
        current_user.id, int_field(body, "analysisId"), body.get("comment"), body.get("abilityMap")
    )
    return success_response(SuccessStatus.ANALYSIS_UPDATE_SUCCESS, analysis_dto)


@analysis_bp.route("/<int:analysis_id>", methods=["DELETE"])
@login_required
def delete_analysis(analysis_id):
    analysis_service.delete_analysis(current_user.id, analysis_id)
    return success_response(SuccessStatus.ANALYSIS_DELETE_SUCCESS)
