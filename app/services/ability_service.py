"""Abilities: the keyword-tagged annotations produced by analyzing a record.

`parse_and_save_abilities` turns the analyzer's `{keyword label: content}`
mapping into Ability rows attached to an Analysis. Labels are validated
against the closed Keyword enumeration before anything is written, so an
unknown label leaves both the database and the in-memory analysis
untouched. Abilities are created in Keyword declaration order, whatever the
iteration order of the incoming mapping.
"""

import logging

from constants import ABILITY_CONTENT_MAX_LENGTH
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
from repositories.user_repository import UserRepository

logger = logging.getLogger("main")


def _resolve_keywords(keyword_map):
    resolved = []
    for label, content in keyword_map.items():
        keyword = Keyword.from_label(label)
        if keyword is None:
            logger.warning(f"Unknown ability keyword {label!r}")
            raise AbilityException(AbilityErrorStatus.INVALID_ABILITY_KEYWORD)
        if not isinstance(content, str) or len(content) > ABILITY_CONTENT_MAX_LENGTH:
            raise AnalysisException(AnalysisErrorStatus.OVERFLOW_ANALYSIS_KEYWORD_CONTENT)
        resolved.append((keyword, content))
    resolved.sort(key=lambda pair: pair[0].order)
    return resolved


@transactional
def parse_and_save_abilities(keyword_map, analysis, user):
    """
    Persist one Ability per entry of keyword_map and append it to analysis.

    Raises:
        AbilityException(INVALID_ABILITY_KEYWORD): some label is not a Keyword;
            nothing is saved.
    """
    resolved = _resolve_keywords(keyword_map)

    for keyword, content in resolved:
        ability = analysis_converter.to_ability(keyword, content, analysis, user)
        # Appended before the flush, a lazy load afterwards would list it twice
        analysis.abilities.append(ability)
        AbilityRepository.save(ability)

    logger.info(f"Saved {len(resolved)} abilities for analysis {analysis.id}")
    return analysis.abilities


@transactional
def delete_origin_ability_list(analysis):
    """Remove every ability of an analysis, before it is re-parsed"""
    abilities = list(analysis.abilities)
    for ability in abilities:
        AbilityRepository.delete(ability)
    analysis.abilities.clear()
    logger.info(f"Deleted {len(abilities)} abilities of analysis {analysis.id}")


def _get_user(user_id):
    user = UserRepository.get_by_id(user_id)
    if user is None:
        raise GeneralException(ErrorStatus.UNAUTHORIZED)
    return user


@transactional
def get_keyword_list(user_id):
    user = _get_user(user_id)
    keywords = AbilityRepository.get_keyword_list(user.id)
    return analysis_converter.to_keyword_list_dto(keywords)


@transactional
def get_keyword_graph(user_id):
    user = _get_user(user_id)
    keyword_counts = AbilityRepository.get_keyword_counts(user.id)
    return analysis_converter.to_graph_dto(keyword_counts)
