"""
Model: Ability

An Ability is one (keyword, content) annotation produced by analyzing a
record. The set of keywords is closed; declaration order below is the
order abilities are stored and displayed in.
"""

import enum

from db import db, TimestampMixin


class Keyword(enum.Enum):
    COMMUNICATION = "커뮤니케이션"
    COLLABORATION = "협업"
    PROBLEM_SOLVING = "문제해결"
    LEADERSHIP = "리더십"
    CREATIVITY = "창의성"
    ANALYTICAL_THINKING = "분석력"
    ADAPTABILITY = "적응력"
    RESPONSIBILITY = "책임감"
    CHALLENGE = "도전정신"
    EXPERTISE = "전문성"

    @property
    def label(self):
        return self.value

    @property
    def order(self):
        return _KEYWORD_ORDER[self]

    @classmethod
    def from_label(cls, label):
        for keyword in cls:
            if keyword.value == label:
                return keyword
        return None


_KEYWORD_ORDER = {keyword: index for index, keyword in enumerate(Keyword)}


class Ability(TimestampMixin, db.Model):
    id = db.Column(db.Integer, primary_key=True)
    keyword = db.Column(db.Enum(Keyword), nullable=False, index=True)
    content = db.Column(db.String(200), nullable=False)
    analysis_id = db.Column(db.Integer, db.ForeignKey("analysis.id", ondelete="CASCADE"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("user.id", ondelete="CASCADE"), nullable=False)

    __table_args__ = (db.Index("idx_ability_user_keyword", "user_id", "keyword"),)
