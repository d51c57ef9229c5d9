from dataclasses import dataclass
from typing import List

from models.analysis import Analysis
from models.ability import Ability
from utils import format_date


@dataclass(frozen=True)
class AbilityDto:
    keyword: str
    content: str


@dataclass(frozen=True)
class AnalysisDto:
    analysis_id: int
    record_id: int
    record_title: str
    record_content: str
    ability_dto_list: List[AbilityDto]
    comment: str
    created_at: str


@dataclass(frozen=True)
class KeywordListDto:
    keyword_list: List[str]


@dataclass(frozen=True)
class KeywordStateDto:
    keyword: str
    count: int
    percent: float


@dataclass(frozen=True)
class GraphDto:
    keyword_graph: List[KeywordStateDto]


def to_analysis(content, comment, record):
    return Analysis(content=content, comment=comment, record_id=record.id, abilities=[])


def to_ability(keyword, content, analysis, user):
    return Ability(keyword=keyword, content=content, analysis_id=analysis.id, user_id=user.id)


def to_ability_dto(ability):
    return AbilityDto(keyword=ability.keyword.label, content=ability.content)


def to_analysis_dto(analysis, record):
    return AnalysisDto(
        analysis_id=analysis.id,
        record_id=record.id,
        record_title=record.title,
        record_content=record.content,
        ability_dto_list=[to_ability_dto(ability) for ability in analysis.abilities],
        comment=analysis.comment,
        created_at=format_date(analysis.created_at),
    )


def to_keyword_list_dto(keywords):
    return KeywordListDto(keyword_list=[keyword.label for keyword in keywords])


def to_graph_dto(keyword_counts):
    total = sum(count for _, count in keyword_counts)
    return GraphDto(keyword_graph=[
        KeywordStateDto(
            keyword=keyword.label,
            count=count,
            percent=round(count * 100 / total, 1) if total else 0.0,
        )
        for keyword, count in keyword_counts
    ])
