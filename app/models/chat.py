"""
Model: ChatRoom, Chat
"""

from db import db, TimestampMixin
from utils import now_utc


class ChatRoom(TimestampMixin, db.Model):
    __tablename__ = "chat_room"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)

    chats = db.relationship("Chat", cascade="all, delete-orphan", passive_deletes=True, order_by="Chat.id")


class Chat(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    chat_room_id = db.Column(db.Integer, db.ForeignKey("chat_room.id", ondelete="CASCADE"), nullable=False, index=True)
    author = db.Column(db.Integer, nullable=False)  # 0 assistant, 1 user
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=now_utc, nullable=False)
