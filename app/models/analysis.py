"""
Model: Analysis
"""

from db import db, TimestampMixin


class Analysis(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    record_id = db.Column(db.Integer, db.ForeignKey("record.id", ondelete="CASCADE"), unique=True, nullable=False)
    content = db.Column(db.Text)
    comment = db.Column(db.String(200))

    abilities = db.relationship(
        "Ability", cascade="all, delete-orphan", passive_deletes=True, order_by="Ability.id"
    )
