"""
Repository for ChatRoom and Chat database operations
"""

from db import db
from models.chat import ChatRoom, Chat


class ChatRepository:
    """Repository for ChatRoom and Chat database operations"""

    @staticmethod
    def get_room_by_id(id):
        return db.session.get(ChatRoom, id)

    @staticmethod
    def save_room(chat_room):
        db.session.add(chat_room)
        db.session.flush()
        return chat_room

    @staticmethod
    def delete_room(chat_room):
        """Delete a chat room, its chats cascade"""
        db.session.delete(chat_room)
        db.session.flush()

    @staticmethod
    def save_chat(chat):
        db.session.add(chat)
        db.session.flush()
        return chat

    @staticmethod
    def get_chats(chat_room_id):
        return Chat.query.filter_by(chat_room_id=chat_room_id).order_by(Chat.id).all()
