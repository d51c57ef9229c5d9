"""
Chat rooms where the user talks through an experience with the AI
assistant before filing it as a record.
"""
import logging

from ai_client import AiClientException, get_ai_client
from constants import CHAT_AUTHOR_ASSISTANT, CHAT_AUTHOR_USER, CHAT_GREETING
from converters import chat_converter
from db import transactional
from exceptions import ChatErrorStatus, ChatException, RecordErrorStatus, RecordException
from repositories.chat_repository import ChatRepository
from repositories.record_repository import RecordRepository
from repositories.user_repository import UserRepository
from services.record_service import delete_tmp_chat
from services.user_service import get_user

logger = logging.getLogger("main")


@transactional
def create_chat_room(user_id):
    """Open a chat room with the assistant greeting as its first message"""
    user = get_user(user_id)
    chat_room = ChatRepository.save_room(chat_converter.to_chat_room_entity(user))

    greeting = save_chat(CHAT_AUTHOR_ASSISTANT, CHAT_GREETING.format(nick_name=user.nick_name), chat_room)
    logger.info(f"Created chat room {chat_room.id} for user {user.id}")
    return chat_converter.to_chat_room_dto(chat_room, greeting)


@transactional
def create_chat(user_id, chat_room_id, content):
    """Store a user message and the assistant's answer to the conversation so far"""
    user = get_user(user_id)
    chat_room = find_chat_room(user.id, chat_room_id)
    if not isinstance(content, str) or not content.strip():
        raise ChatException(ChatErrorStatus.EMPTY_CHAT_CONTENT)

    save_chat(CHAT_AUTHOR_USER, content, chat_room)
    messages = chat_converter.to_ai_messages(ChatRepository.get_chats(chat_room.id))
    try:
        answer = get_ai_client().generate_chat_response(messages)
    except AiClientException as e:
        logger.error(f"Chat response failed for room {chat_room.id}: {e}")
        raise ChatException(ChatErrorStatus.INVALID_AI_RESPONSE)

    reply = save_chat(CHAT_AUTHOR_ASSISTANT, answer, chat_room)
    return chat_converter.to_chats_dto(chat_room, [reply])


@transactional
def get_chat_list(user_id, chat_room_id):
    user = get_user(user_id)
    chat_room = find_chat_room(user.id, chat_room_id)
    return chat_converter.to_chats_dto(chat_room, ChatRepository.get_chats(chat_room.id))


@transactional
def delete_chat_room(user_id, chat_room_id):
    user = get_user(user_id)
    chat_room = find_chat_room(user.id, chat_room_id)

    tmp_record = RecordRepository.get_by_id(user.tmp_chat) if user.tmp_chat is not None else None
    if tmp_record is not None and tmp_record.chat_room_id == chat_room.id:
        delete_tmp_chat(user)

    ChatRepository.delete_room(chat_room)
    logger.info(f"Deleted chat room {chat_room_id}")


@transactional
def get_chat_summary(user_id, chat_room_id):
    """Ask the assistant for a record title and content summarizing the chat"""
    user = get_user(user_id)
    chat_room = find_chat_room(user.id, chat_room_id)

    chats = ChatRepository.get_chats(chat_room.id)
    if not any(chat.author == CHAT_AUTHOR_USER for chat in chats):
        raise ChatException(ChatErrorStatus.NOT_ENOUGH_CHAT)

    try:
        summary = get_ai_client().generate_chat_summary(chat_converter.to_ai_messages(chats))
    except AiClientException as e:
        logger.error(f"Chat summary failed for room {chat_room.id}: {e}")
        raise ChatException(ChatErrorStatus.INVALID_AI_RESPONSE)

    return chat_converter.to_chat_summary_dto(chat_room, summary)


@transactional
def save_tmp_chat(user_id, chat_room_id):
    """Remember a chat room as the user's unfinished chat"""
    user = get_user(user_id)
    if user.tmp_chat is not None:
        raise RecordException(RecordErrorStatus.ALREADY_TMP_CHAT)
    chat_room = find_chat_room(user.id, chat_room_id)

    record = RecordRepository.save(chat_converter.to_tmp_chat_record_entity(user, chat_room))
    user.tmp_chat = record.id
    UserRepository.save(user)
    logger.info(f"Saved temporary chat {chat_room.id} for user {user.id}")


@transactional
def get_tmp_chat(user_id):
    """Return the unfinished chat room, if any, and forget it"""
    user = get_user(user_id)
    if user.tmp_chat is None:
        return chat_converter.to_chat_tmp_dto()

    record = RecordRepository.get_by_id(user.tmp_chat)
    dto = chat_converter.to_chat_tmp_dto(record)
    delete_tmp_chat(user)
    return dto


def find_chat_room(user_id, chat_room_id):
    chat_room = ChatRepository.get_room_by_id(chat_room_id)
    if chat_room is None:
        raise ChatException(ChatErrorStatus.CHAT_ROOM_NOT_FOUND)
    if chat_room.user_id != user_id:
        raise ChatException(ChatErrorStatus.USER_CHAT_ROOM_UNAUTHORIZED)
    return chat_room


def save_chat(author, content, chat_room):
    return ChatRepository.save_chat(chat_converter.to_chat_entity(author, content, chat_room))
