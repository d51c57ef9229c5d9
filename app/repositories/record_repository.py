"""
Repository for Record database operations
"""

from db import db
from models.record import Record
from models.analysis import Analysis
from models.ability import Ability


def _page(query, last_record_id, limit):
    """Keyset pagination on descending record id"""
    if last_record_id:
        query = query.filter(Record.id < last_record_id)
    return query.order_by(Record.id.desc()).limit(limit).all()


class RecordRepository:
    """Repository for Record database operations"""

    @staticmethod
    def get_by_id(id):
        """Get Record by ID"""
        return db.session.get(Record, id)

    @staticmethod
    def save(record):
        db.session.add(record)
        db.session.flush()
        return record

    @staticmethod
    def delete(record):
        db.session.delete(record)
        db.session.flush()

    @staticmethod
    def get_record_count(user_id):
        """Count every record of a user, temporary placeholders included"""
        return Record.query.filter_by(user_id=user_id).count()

    @staticmethod
    def get_records(user_id, last_record_id=0, limit=30):
        """Filed records of a user across all folders, newest first"""
        query = Record.query.filter(Record.user_id == user_id, Record.folder_id.isnot(None))
        return _page(query, last_record_id, limit)

    @staticmethod
    def get_records_by_folder(user_id, folder_id, last_record_id=0, limit=30):
        query = Record.query.filter(Record.user_id == user_id, Record.folder_id == folder_id)
        return _page(query, last_record_id, limit)

    @staticmethod
    def get_records_by_keyword(user_id, keyword, last_record_id=0, limit=30):
        """Records whose analysis holds an ability with the given keyword"""
        query = (
            Record.query.join(Analysis, Analysis.record_id == Record.id)
            .join(Ability, Ability.analysis_id == Analysis.id)
            .filter(Record.user_id == user_id, Record.folder_id.isnot(None), Ability.keyword == keyword)
            .distinct()
        )
        return _page(query, last_record_id, limit)

    @staticmethod
    def get_recent_records(user_id, limit=3):
        query = Record.query.filter(Record.user_id == user_id, Record.folder_id.isnot(None))
        return query.order_by(Record.created_at.desc(), Record.id.desc()).limit(limit).all()
