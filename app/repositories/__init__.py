"""
Repositories package

Each repository encapsulates database operations for one model:
- user_repository.py
- folder_repository.py
- record_repository.py
- analysis_repository.py
- ability_repository.py
- chat_repository.py
- refreshtoken_repository.py (Redis)

Repositories add, flush and delete through db.session but never commit;
the calling service owns the transaction (see db.transactional).

Usage:
    from repositories.user_repository import UserRepository
    user = UserRepository.get_by_id(user_id)
"""
