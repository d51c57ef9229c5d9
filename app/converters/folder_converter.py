from dataclasses import dataclass
from typing import List

from models.folder import Folder


@dataclass(frozen=True)
class FolderDto:
    folder_id: int
    title: str


@dataclass(frozen=True)
class FolderListDto:
    folder_dto_list: List[FolderDto]


def to_folder_entity(title, user):
    return Folder(title=title, user_id=user.id)


def to_folder_dto(folder):
    return FolderDto(folder_id=folder.id, title=folder.title)


def to_folder_list_dto(folders):
    return FolderListDto(folder_dto_list=[to_folder_dto(folder) for folder in folders])
