"""
Ability Routes - keyword list and keyword usage graph
"""

from flask import Blueprint
from flask_login import current_user, login_required

from api_responses import SuccessStatus, success_response
from services import ability_service

ability_bp = Blueprint("ability", __name__, url_prefix="/api/abilities")


@ability_bp.route("/keywords", methods=["GET"])
@login_required
def get_keyword_list():
    return success_response(SuccessStatus.GET_KEYWORD_LIST_SUCCESS, ability_service.get_keyword_list(current_user.id))


@ability_bp.route("/graph", methods=["GET"])
@login_required
def get_keyword_graph():
    return success_response(SuccessStatus.GET_KEYWORD_GRAPH_SUCCESS, ability_service.get_keyword_graph(current_user.id))
