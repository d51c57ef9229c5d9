"""
Model: User
"""

import enum

from db import db, TimestampMixin
from flask_login import UserMixin


class Status(enum.Enum):
    """Occupation a user picks at registration, stored by name and shown by label."""

    UNIVERSITY_STUDENT = "대학생"
    GRADUATE_STUDENT = "대학원생"
    JOB_SEEKER = "취업준비생"
    EMPLOYED = "직장인"
    OTHER = "기타"

    @property
    def label(self):
        return self.value

    @classmethod
    def from_label(cls, label):
        for status in cls:
            if status.value == label:
                return status
        return None


class User(UserMixin, TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    provider_id = db.Column(db.String(255), unique=True, nullable=False, index=True)
    nick_name = db.Column(db.String(10), nullable=False)
    status = db.Column(db.Enum(Status), nullable=False)

    # Record ids of the in-progress placeholders, not real records yet
    tmp_memo = db.Column(db.Integer, nullable=True)
    tmp_chat = db.Column(db.Integer, nullable=True)

    folders = db.relationship(
        "Folder", cascade="all, delete-orphan", passive_deletes=True, order_by="Folder.id"
    )
    records = db.relationship(
        "Record", cascade="all, delete-orphan", passive_deletes=True, order_by="Record.id"
    )
    chat_rooms = db.relationship(
        "ChatRoom", cascade="all, delete-orphan", passive_deletes=True, order_by="ChatRoom.id"
    )
