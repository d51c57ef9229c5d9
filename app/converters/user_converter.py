from dataclasses import dataclass

from models.user import User, Status


@dataclass(frozen=True)
class UserDto:
    user_id: int
    nick_name: str
    status: str


@dataclass(frozen=True)
class UserInfoDto:
    user_id: int
    nick_name: str
    status: str
    record_count: int


@dataclass(frozen=True)
class LoginDto:
    registered: bool
    register_token: str = None


def to_user_entity(provider_id, nick_name, status: Status):
    return User(provider_id=provider_id, nick_name=nick_name, status=status)


def to_user_dto(user):
    return UserDto(user_id=user.id, nick_name=user.nick_name, status=user.status.label)


def to_user_info_dto(user, record_count):
    return UserInfoDto(
        user_id=user.id,
        nick_name=user.nick_name,
        status=user.status.label,
        record_count=record_count,
    )
