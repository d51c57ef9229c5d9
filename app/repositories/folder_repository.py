"""
Repository for Folder database operations
"""

from db import db
from models.folder import Folder


class FolderRepository:
    """Repository for Folder database operations"""

    @staticmethod
    def get_by_id(id):
        """Get Folder by ID"""
        return db.session.get(Folder, id)

    @staticmethod
    def get_by_user_and_title(user_id, title):
        return Folder.query.filter_by(user_id=user_id, title=title).first()

    @staticmethod
    def exists_by_user_and_title(user_id, title):
        return db.session.query(Folder.query.filter_by(user_id=user_id, title=title).exists()).scalar()

    @staticmethod
    def get_all_by_user(user_id):
        """Folders of a user, newest first"""
        return Folder.query.filter_by(user_id=user_id).order_by(Folder.created_at.desc(), Folder.id.desc()).all()

    @staticmethod
    def save(folder):
        db.session.add(folder)
        db.session.flush()
        return folder

    @staticmethod
    def delete(folder):
        """Delete Folder record, its records cascade"""
        db.session.delete(folder)
        db.session.flush()
