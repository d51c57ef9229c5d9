"""
Folders group a user's records. Titles are unique per user.
"""
import logging

from constants import FOLDER_TITLE_MAX_LENGTH
from converters import folder_converter
from db import transactional
from exceptions import FolderErrorStatus, FolderException
from repositories.folder_repository import FolderRepository
from services.user_service import get_user

logger = logging.getLogger("main")


@transactional
def create_folder(user_id, title):
    """Create a folder and return the user's updated folder list"""
    user = get_user(user_id)
    validate_folder_title(title)
    check_duplicated_title(user.id, title)

    folder = FolderRepository.save(folder_converter.to_folder_entity(title, user))
    logger.info(f"Created folder {folder.id} for user {user.id}")
    return get_folder_list(user.id)


@transactional
def update_folder(user_id, folder_id, title):
    user = get_user(user_id)
    folder = find_folder(user.id, folder_id)
    validate_folder_title(title)
    if folder.title != title:
        check_duplicated_title(user.id, title)

    folder.title = title
    FolderRepository.save(folder)
    return get_folder_list(user.id)


@transactional
def delete_folder(user_id, folder_id):
    """Delete a folder together with every record filed in it"""
    user = get_user(user_id)
    folder = find_folder(user.id, folder_id)

    FolderRepository.delete(folder)
    logger.info(f"Deleted folder {folder_id} of user {user.id}")
    return get_folder_list(user.id)


@transactional
def get_folder_list(user_id):
    user = get_user(user_id)
    return folder_converter.to_folder_list_dto(FolderRepository.get_all_by_user(user.id))


def find_folder(user_id, folder_id):
    folder = FolderRepository.get_by_id(folder_id)
    if folder is None:
        raise FolderException(FolderErrorStatus.FOLDER_NOT_FOUND)
    if folder.user_id != user_id:
        raise FolderException(FolderErrorStatus.USER_FOLDER_UNAUTHORIZED)
    return folder


def find_folder_by_title(user_id, title):
    folder = FolderRepository.get_by_user_and_title(user_id, title)
    if folder is None:
        raise FolderException(FolderErrorStatus.FOLDER_NOT_FOUND)
    return folder


def validate_folder_title(title):
    if not isinstance(title, str) or not title.strip() or len(title) > FOLDER_TITLE_MAX_LENGTH:
        raise FolderException(FolderErrorStatus.INVALID_FOLDER_TITLE)


def check_duplicated_title(user_id, title):
    if FolderRepository.exists_by_user_and_title(user_id, title):
        raise FolderException(FolderErrorStatus.DUPLICATED_FOLDER_TITLE)
