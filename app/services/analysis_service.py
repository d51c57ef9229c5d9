"""
Analysis of records by the external AI service.

An Analysis holds the AI comment for one record and the abilities parsed
from the AI keyword list (see ability_service).
"""
import logging

from ai_client import AiClientException, get_ai_client
from constants import ABILITY_CONTENT_MAX_LENGTH, ANALYSIS_COMMENT_MAX_LENGTH
from converters import analysis_converter
from db import transactional
from exceptions import (
    AbilityErrorStatus,
    AbilityException,
    AnalysisErrorStatus,
    AnalysisException,
    ErrorStatus,
    GeneralException,
)
from models.ability import Keyword
from repositories.ability_repository import AbilityRepository
from repositories.analysis_repository import AnalysisRepository
from repositories.record_repository import RecordRepository
from services import ability_service
from services.user_service import get_user

logger = logging.getLogger("main")


@transactional
def create_analysis(record, user):
    """
    Analyze a freshly created record and persist the result.

    Raises:
        AnalysisException(INVALID_AI_RESPONSE): the AI service failed.
        AnalysisException(OVERFLOW_ANALYSIS_COMMENT): comment too long.
        AbilityException(INVALID_ABILITY_KEYWORD): no or unknown keywords.
    """
    response = generate_analysis(record.content)

    analysis = analysis_converter.to_analysis(record.content, response["comment"], record)
    AnalysisRepository.save(analysis)

    ability_service.parse_and_save_abilities(response["keywordList"], analysis, user)
    logger.info(f"Created analysis {analysis.id} for record {record.id}")
    return analysis


@transactional
def recreate_analysis(user_id, analysis_id):
    """Run the AI analysis again over the record and replace comment and abilities"""
    user = get_user(user_id)
    analysis = find_analysis(user.id, analysis_id)
    record = RecordRepository.get_by_id(analysis.record_id)

    response = generate_analysis(record.content)

    ability_service.delete_origin_ability_list(analysis)
    analysis.content = record.content
    analysis.comment = response["comment"]
    AnalysisRepository.save(analysis)

    ability_service.parse_and_save_abilities(response["keywordList"], analysis, user)
    logger.info(f"Recreated analysis {analysis.id}")
    return analysis_converter.to_analysis_dto(analysis, record)


@transactional
def get_analysis(user_id, analysis_id):
    user = get_user(user_id)
    analysis = find_analysis(user.id, analysis_id)
    record = RecordRepository.get_by_id(analysis.record_id)
    return analysis_converter.to_analysis_dto(analysis, record)


@transactional
def update_analysis(user_id, analysis_id, comment=None, ability_map=None):
    """
    Edit the comment and/or the contents of existing abilities.

    ability_map maps keyword labels to new contents; keywords the analysis
    does not hold are rejected.
    """
    user = get_user(user_id)
    analysis = find_analysis(user.id, analysis_id)

    if comment is not None:
        if not isinstance(comment, str):
            raise GeneralException(ErrorStatus.BAD_REQUEST)
        validate_comment(comment)
        analysis.comment = comment

    if ability_map is not None and not isinstance(ability_map, dict):
        raise GeneralException(ErrorStatus.BAD_REQUEST)

    for label, content in (ability_map or {}).items():
        keyword = Keyword.from_label(label)
        if keyword is None:
            raise AbilityException(AbilityErrorStatus.INVALID_ABILITY_KEYWORD)
        ability = AbilityRepository.get_by_analysis_and_keyword(analysis.id, keyword)
        if ability is None:
            raise AbilityException(AbilityErrorStatus.INVALID_ABILITY_KEYWORD)
        if not isinstance(content, str) or not content or len(content) > ABILITY_CONTENT_MAX_LENGTH:
            raise AnalysisException(AnalysisErrorStatus.OVERFLOW_ANALYSIS_KEYWORD_CONTENT)
        ability.content = content

    AnalysisRepository.save(analysis)
    record = RecordRepository.get_by_id(analysis.record_id)
    return analysis_converter.to_analysis_dto(analysis, record)


@transactional
def delete_analysis(user_id, analysis_id):
    """Delete an analysis together with the record it belongs to"""
    user = get_user(user_id)
    analysis = find_analysis(user.id, analysis_id)
    record = RecordRepository.get_by_id(analysis.record_id)

    AnalysisRepository.delete(analysis)
    RecordRepository.delete(record)
    logger.info(f"Deleted analysis {analysis_id} and record {record.id}")


def find_analysis(user_id, analysis_id):
    analysis = AnalysisRepository.get_by_id(analysis_id)
    if analysis is None:
        raise AnalysisException(AnalysisErrorStatus.ANALYSIS_NOT_FOUND)

    record = RecordRepository.get_by_id(analysis.record_id)
    if record is None or record.user_id != user_id:
        raise AnalysisException(AnalysisErrorStatus.USER_ANALYSIS_UNAUTHORIZED)
    return analysis


def generate_analysis(content):
    try:
        response = get_ai_client().generate_analysis(content)
    except AiClientException as e:
        logger.error(f"Analysis generation failed: {e}")
        raise AnalysisException(AnalysisErrorStatus.INVALID_AI_RESPONSE)

    validate_comment(response["comment"])
    if not response["keywordList"]:
        raise AbilityException(AbilityErrorStatus.INVALID_ABILITY_KEYWORD)
    return response


def validate_comment(comment):
    if len(comment) > ANALYSIS_COMMENT_MAX_LENGTH:
        raise AnalysisException(AnalysisErrorStatus.OVERFLOW_ANALYSIS_COMMENT)
