"""
Models package

One module per entity:
- user.py (User, Status)
- folder.py (Folder)
- record.py (Record, RecordType)
- analysis.py (Analysis)
- ability.py (Ability, Keyword)
- chat.py (ChatRoom, Chat)
- refreshtoken.py (RefreshToken, kept in Redis; see
  repositories/refreshtoken_repository.py)
"""

from .user import User, Status
from .folder import Folder
from .record import Record, RecordType
from .analysis import Analysis
from .ability import Ability, Keyword
from .chat import ChatRoom, Chat
from .refreshtoken import RefreshToken

__all__ = [
    "User",
    "Status",
    "Folder",
    "Record",
    "RecordType",
    "Analysis",
    "Ability",
    "Keyword",
    "ChatRoom",
    "Chat",
    "RefreshToken",
]
