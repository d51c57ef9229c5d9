from dataclasses import dataclass
from typing import List, Optional

from models.record import Record, RecordType
from utils import format_date


@dataclass(frozen=True)
class MemoRecordDto:
    record_id: int
    folder_id: Optional[int]
    folder_title: Optional[str]
    title: str
    content: str
    created_at: str


@dataclass(frozen=True)
class TmpMemoRecordDto:
    is_exist: bool
    title: Optional[str] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class RecordDto:
    record_id: int
    analysis_id: Optional[int]
    folder_id: Optional[int]
    title: str
    type: str
    keyword_list: List[str]
    created_at: str


@dataclass(frozen=True)
class RecordListDto:
    record_dto_list: List[RecordDto]
    has_next: bool


def to_memo_record_entity(title, content, user, folder=None):
    return Record(
        title=title,
        content=content,
        type=RecordType.MEMO,
        user_id=user.id,
        folder_id=folder.id if folder is not None else None,
    )


def to_chat_record_entity(title, content, user, chat_room, folder=None):
    return Record(
        title=title,
        content=content,
        type=RecordType.CHAT,
        user_id=user.id,
        folder_id=folder.id if folder is not None else None,
        chat_room_id=chat_room.id,
    )


def to_memo_record_dto(record, folder=None):
    return MemoRecordDto(
        record_id=record.id,
        folder_id=folder.id if folder is not None else None,
        folder_title=folder.title if folder is not None else None,
        title=record.title,
        content=record.content,
        created_at=format_date(record.created_at),
    )


def to_tmp_memo_record_dto(record=None):
    if record is None:
        return TmpMemoRecordDto(is_exist=False)
    return TmpMemoRecordDto(is_exist=True, title=record.title, content=record.content)


def to_record_dto(record):
    analysis = record.analysis
    return RecordDto(
        record_id=record.id,
        analysis_id=analysis.id if analysis is not None else None,
        folder_id=record.folder_id,
        title=record.title,
        type=record.type.value,
        keyword_list=[ability.keyword.label for ability in analysis.abilities] if analysis is not None else [],
        created_at=format_date(record.created_at),
    )


def to_record_list_dto(records, has_next=False):
    return RecordListDto(record_dto_list=[to_record_dto(record) for record in records], has_next=has_next)
