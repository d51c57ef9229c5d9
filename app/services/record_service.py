"""
Experience records: memos written by the user and chat transcripts.

Every filed record gets an Analysis on creation. A user may also keep one
unfiled temporary memo, stored as a Record without folder and referenced
from User.tmp_memo until it is read back.
"""
import logging

from constants import (
    CHAT_AUTHOR_USER,
    RECENT_RECORD_COUNT,
    RECORD_CONTENT_MAX_LENGTH,
    RECORD_CONTENT_MIN_LENGTH,
    RECORD_PAGE_SIZE,
    RECORD_TITLE_MAX_LENGTH,
)
from converters import analysis_converter, record_converter
from db import transactional
from exceptions import (
    AbilityErrorStatus,
    AbilityException,
    ChatErrorStatus,
    ChatException,
    ErrorStatus,
    GeneralException,
    RecordErrorStatus,
    RecordException,
)
from models.ability import Keyword
from repositories.chat_repository import ChatRepository
from repositories.folder_repository import FolderRepository
from repositories.record_repository import RecordRepository
from repositories.user_repository import UserRepository
from services import analysis_service
from services.folder_service import find_folder, find_folder_by_title
from services.user_service import get_user

logger = logging.getLogger("main")


@transactional
def create_memo_record(user_id, title, content, folder_id):
    """Create a memo record in a folder, analyze it and drop the temporary memo"""
    user = get_user(user_id)
    validate_title(title)
    validate_content(content)
    folder = find_folder(user.id, folder_id)

    record = RecordRepository.save(record_converter.to_memo_record_entity(title, content, user, folder))
    analysis = analysis_service.create_analysis(record, user)

    delete_tmp_memo(user)
    logger.info(f"Created memo record {record.id} for user {user.id}")
    return analysis_converter.to_analysis_dto(analysis, record)


@transactional
def create_chat_record(user_id, title, chat_room_id, folder_id):
    """File a chat room transcript as a record and analyze it"""
    user = get_user(user_id)
    validate_title(title)
    folder = find_folder(user.id, folder_id)
    chat_room = ChatRepository.get_room_by_id(chat_room_id)
    if chat_room is None:
        raise ChatException(ChatErrorStatus.CHAT_ROOM_NOT_FOUND)
    if chat_room.user_id != user.id:
        raise ChatException(ChatErrorStatus.USER_CHAT_ROOM_UNAUTHORIZED)

    content = to_transcript(ChatRepository.get_chats(chat_room.id))
    if not content:
        raise ChatException(ChatErrorStatus.NOT_ENOUGH_CHAT)

    record = RecordRepository.save(
        record_converter.to_chat_record_entity(title, content, user, chat_room, folder)
    )
    analysis = analysis_service.create_analysis(record, user)

    delete_tmp_chat(user)
    logger.info(f"Created chat record {record.id} from chat room {chat_room.id}")
    return analysis_converter.to_analysis_dto(analysis, record)


@transactional
def get_memo_record(user_id, record_id):
    user = get_user(user_id)
    record = find_record(user.id, record_id)
    if not record.is_memo:
        raise RecordException(RecordErrorStatus.INVALID_RECORD_TYPE)

    folder = FolderRepository.get_by_id(record.folder_id) if record.folder_id else None
    return record_converter.to_memo_record_dto(record, folder)


@transactional
def save_tmp_memo(user_id, title, content):
    user = get_user(user_id)
    if user.tmp_memo is not None:
        raise RecordException(RecordErrorStatus.ALREADY_TMP_MEMO)
    validate_title(title or "")
    if content is not None and not isinstance(content, str):
        raise GeneralException(ErrorStatus.BAD_REQUEST)
    if content and len(content) > RECORD_CONTENT_MAX_LENGTH:
        raise RecordException(RecordErrorStatus.OVERFLOW_MEMO_RECORD_CONTENT)

    record = RecordRepository.save(record_converter.to_memo_record_entity(title or "", content or "", user))
    user.tmp_memo = record.id
    UserRepository.save(user)
    logger.info(f"Saved temporary memo {record.id} for user {user.id}")


@transactional
def get_tmp_memo(user_id):
    """Return the temporary memo, if any, and delete it"""
    user = get_user(user_id)
    if user.tmp_memo is None:
        return record_converter.to_tmp_memo_record_dto()

    record = RecordRepository.get_by_id(user.tmp_memo)
    dto = record_converter.to_tmp_memo_record_dto(record)
    delete_tmp_memo(user)
    return dto


@transactional
def update_folder(user_id, record_id, folder_title):
    """Move a record to another folder of the same user"""
    user = get_user(user_id)
    record = find_record(user.id, record_id)
    folder = find_folder_by_title(user.id, folder_title)

    record.folder_id = folder.id
    RecordRepository.save(record)
    logger.info(f"Moved record {record.id} to folder {folder.id}")


@transactional
def get_record_list(user_id, folder_id=None, last_record_id=0):
    """Records of a folder, or of every folder when folder_id is None, newest first"""
    user = get_user(user_id)
    if folder_id is None:
        records = RecordRepository.get_records(user.id, last_record_id, RECORD_PAGE_SIZE + 1)
    else:
        folder = find_folder(user.id, folder_id)
        records = RecordRepository.get_records_by_folder(
            user.id, folder.id, last_record_id, RECORD_PAGE_SIZE + 1
        )
    return to_page(records)


@transactional
def get_keyword_record_list(user_id, keyword_label, last_record_id=0):
    user = get_user(user_id)
    keyword = Keyword.from_label(keyword_label)
    if keyword is None:
        raise AbilityException(AbilityErrorStatus.INVALID_ABILITY_KEYWORD)

    records = RecordRepository.get_records_by_keyword(user.id, keyword, last_record_id, RECORD_PAGE_SIZE + 1)
    return to_page(records)


@transactional
def get_recent_record_list(user_id):
    user = get_user(user_id)
    records = RecordRepository.get_recent_records(user.id, RECENT_RECORD_COUNT)
    return record_converter.to_record_list_dto(records)


def to_page(records):
    # One extra row was fetched to tell whether another page exists
    has_next = len(records) > RECORD_PAGE_SIZE
    return record_converter.to_record_list_dto(records[:RECORD_PAGE_SIZE], has_next)


def find_record(user_id, record_id):
    record = RecordRepository.get_by_id(record_id)
    if record is None:
        raise RecordException(RecordErrorStatus.RECORD_NOT_FOUND)
    if record.user_id != user_id:
        raise RecordException(RecordErrorStatus.USER_RECORD_UNAUTHORIZED)
    return record


def delete_tmp_memo(user):
    if user.tmp_memo is None:
        return
    record = RecordRepository.get_by_id(user.tmp_memo)
    if record is not None:
        RecordRepository.delete(record)
    user.tmp_memo = None
    UserRepository.save(user)


def delete_tmp_chat(user):
    if user.tmp_chat is None:
        return
    record = RecordRepository.get_by_id(user.tmp_chat)
    if record is not None:
        RecordRepository.delete(record)
    user.tmp_chat = None
    UserRepository.save(user)


def to_transcript(chats):
    """The user's side of a chat, one message per line"""
    return "\n".join(chat.content for chat in chats if chat.author == CHAT_AUTHOR_USER)


def validate_title(title):
    if not isinstance(title, str):
        raise GeneralException(ErrorStatus.BAD_REQUEST)
    if len(title) > RECORD_TITLE_MAX_LENGTH:
        raise RecordException(RecordErrorStatus.OVERFLOW_MEMO_RECORD_TITLE)


def validate_content(content):
    if not isinstance(content, str) or len(content) < RECORD_CONTENT_MIN_LENGTH:
        raise RecordException(RecordErrorStatus.NOT_ENOUGH_MEMO_RECORD_CONTENT)
    if len(content) > RECORD_CONTENT_MAX_LENGTH:
        raise RecordException(RecordErrorStatus.OVERFLOW_MEMO_RECORD_CONTENT)
