"""
Model: Record
"""

import enum

from db import db, TimestampMixin


class RecordType(enum.Enum):
    MEMO = "MEMO"
    CHAT = "CHAT"


class Record(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(50), nullable=False)
    content = db.Column(db.Text, nullable=False)
    type = db.Column(db.Enum(RecordType), nullable=False, default=RecordType.MEMO)
    user_id = db.Column(db.Integer, db.ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    # Temporary placeholders are not filed in a folder yet
    folder_id = db.Column(db.Integer, db.ForeignKey("folder.id", ondelete="CASCADE"), nullable=True, index=True)
    chat_room_id = db.Column(db.Integer, db.ForeignKey("chat_room.id", ondelete="SET NULL"), nullable=True)

    analysis = db.relationship("Analysis", uselist=False, cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (db.Index("idx_record_user_folder", "user_id", "folder_id"),)

    @property
    def is_memo(self):
        return self.type == RecordType.MEMO
