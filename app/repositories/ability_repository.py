"""
Repository for Ability database operations
"""

from sqlalchemy import func

from db import db
from models.ability import Ability, Keyword


class AbilityRepository:
    """Repository for Ability database operations"""

    @staticmethod
    def save(ability):
        db.session.add(ability)
        db.session.flush()
        return ability

    @staticmethod
    def delete(ability):
        db.session.delete(ability)

    @staticmethod
    def get_keyword_counts(user_id):
        """
        Usage count per keyword for a user.

        Returns:
            list of (Keyword, count), most used first; ties keep Keyword
            declaration order.
        """
        rows = (
            db.session.query(Ability.keyword, func.count(Ability.id))
            .filter(Ability.user_id == user_id)
            .group_by(Ability.keyword)
            .all()
        )
        return sorted(rows, key=lambda row: (-row[1], row[0].order))

    @staticmethod
    def get_keyword_list(user_id):
        """Distinct keywords ever used by a user, most used first"""
        return [keyword for keyword, _ in AbilityRepository.get_keyword_counts(user_id)]

    @staticmethod
    def get_by_analysis_and_keyword(analysis_id, keyword: Keyword):
        return Ability.query.filter_by(analysis_id=analysis_id, keyword=keyword).first()
