"""
Repository for User database operations
"""

from db import db
from models.user import User


class UserRepository:
    """Repository for User database operations"""

    @staticmethod
    def get_by_id(id):
        """Get User by ID"""
        return db.session.get(User, id)

    @staticmethod
    def get_by_provider_id(provider_id):
        """Get User by identity provider ID"""
        return User.query.filter_by(provider_id=provider_id).first()

    @staticmethod
    def exists_by_provider_id(provider_id):
        return db.session.query(User.query.filter_by(provider_id=provider_id).exists()).scalar()

    @staticmethod
    def save(user):
        """Persist a new or modified User"""
        db.session.add(user)
        db.session.flush()
        return user

    @staticmethod
    def delete_by_id(id):
        """Delete User record, owned rows cascade"""
        item = db.session.get(User, id)
        if not item:
            return False

        db.session.delete(item)
        db.session.flush()
        return True
