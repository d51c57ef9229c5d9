from dataclasses import dataclass
from typing import List, Optional

from constants import CHAT_AUTHOR_USER
from models.chat import ChatRoom, Chat
from models.record import Record, RecordType
from utils import format_date


@dataclass(frozen=True)
class ChatDto:
    chat_id: int
    author: str
    content: str
    created_at: str


@dataclass(frozen=True)
class ChatRoomDto:
    chat_room_id: int
    first_chat: ChatDto


@dataclass(frozen=True)
class ChatsDto:
    chat_room_id: int
    chats: List[ChatDto]


@dataclass(frozen=True)
class ChatSummaryDto:
    chat_room_id: int
    title: str
    content: str


@dataclass(frozen=True)
class ChatTmpDto:
    is_exist: bool
    chat_room_id: Optional[int] = None


def to_chat_room_entity(user):
    return ChatRoom(user_id=user.id, chats=[])


def to_chat_entity(author, content, chat_room):
    return Chat(author=author, content=content, chat_room_id=chat_room.id)


def to_chat_dto(chat):
    return ChatDto(
        chat_id=chat.id,
        author="user" if chat.author == CHAT_AUTHOR_USER else "assistant",
        content=chat.content,
        created_at=format_date(chat.created_at, "%y.%m.%d %H:%M"),
    )


def to_chat_room_dto(chat_room, first_chat):
    return ChatRoomDto(chat_room_id=chat_room.id, first_chat=to_chat_dto(first_chat))


def to_chats_dto(chat_room, chats):
    return ChatsDto(chat_room_id=chat_room.id, chats=[to_chat_dto(chat) for chat in chats])


def to_chat_summary_dto(chat_room, summary):
    return ChatSummaryDto(chat_room_id=chat_room.id, title=summary["title"], content=summary["content"])


def to_tmp_chat_record_entity(user, chat_room):
    """Unfiled placeholder pointing at an unfinished chat room"""
    return Record(title="", content="", type=RecordType.CHAT, user_id=user.id, chat_room_id=chat_room.id)


def to_chat_tmp_dto(record=None):
    if record is None:
        return ChatTmpDto(is_exist=False)
    return ChatTmpDto(is_exist=True, chat_room_id=record.chat_room_id)


def to_ai_messages(chats):
    """Chat history in the shape the AI service expects, oldest first"""
    return [
        {"role": "user" if chat.author == CHAT_AUTHOR_USER else "assistant", "content": chat.content}
        for chat in chats
    ]
