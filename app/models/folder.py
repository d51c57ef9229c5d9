"""
Model: Folder
"""

from db import db, TimestampMixin


class Folder(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(15), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)

    records = db.relationship("Record", cascade="all, delete", passive_deletes=True, order_by="Record.id")

    __table_args__ = (db.UniqueConstraint("user_id", "title", name="uq_folder_user_title"),)
