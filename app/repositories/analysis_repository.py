"""
Repository for Analysis database operations
"""

from db import db
from models.analysis import Analysis


class AnalysisRepository:
    """Repository for Analysis database operations"""

    @staticmethod
    def get_by_id(id):
        """Get Analysis by ID"""
        return db.session.get(Analysis, id)

    @staticmethod
    def save(analysis):
        db.session.add(analysis)
        db.session.flush()
        return analysis

    @staticmethod
    def delete(analysis):
        db.session.delete(analysis)
        db.session.flush()
