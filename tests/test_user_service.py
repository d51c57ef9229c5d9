"""
Tests for user registration, logout, withdrawal and profile
"""
import pytest
from flask import Response


def _cookies(response):
    return {header.split('=', 1)[0]: header for header in response.headers.getlist('Set-Cookie')}


class TestRegisterUser:
    """Tests for sign up with a register token"""

    def test_register_creates_user_and_sets_cookies(self, app, fake_redis):
        import auth
        from models.user import Status
        from repositories.user_repository import UserRepository
        from services import user_service

        response = Response()
        user_dto = user_service.register_user(response, auth.generate_register_token('kakao-new'), '코레코드 01', '대학생')

        user = UserRepository.get_by_provider_id('kakao-new')
        assert user is not None
        assert user.status == Status.UNIVERSITY_STUDENT
        assert user_dto.user_id == user.id
        assert user_dto.nick_name == '코레코드 01'
        assert user_dto.status == '대학생'

        cookies = _cookies(response)
        assert set(cookies) == {'accessToken', 'refreshToken'}
        assert 'HttpOnly' in cookies['accessToken']
        assert 'Path=/' in cookies['refreshToken']
        assert fake_redis.dbsize() == 1
        assert [fake_redis.get(key) for key in fake_redis.keys()] == [str(user.id)]

    def test_refresh_token_ttl_matches_expiration(self, app, fake_redis):
        import auth
        from services import user_service

        user_service.register_user(Response(), auth.generate_register_token('kakao-ttl'), 'ttl', '직장인')

        expiration = app.config['REFRESH_TOKEN_EXPIRATION']
        [key] = fake_redis.keys()
        assert expiration - 1 <= fake_redis.ttl(key) <= expiration

    def test_invalid_register_token(self, app):
        from exceptions import TokenErrorStatus, TokenException
        from services import user_service

        with pytest.raises(TokenException) as exc_info:
            user_service.register_user(Response(), 'not-a-token', 'tester', '대학생')

        assert exc_info.value.status == TokenErrorStatus.INVALID_REGISTER_TOKEN

    def test_access_token_is_not_a_register_token(self, app, user):
        import auth
        from exceptions import TokenException
        from services import user_service

        with pytest.raises(TokenException):
            user_service.register_user(Response(), auth.generate_access_token(user.id), 'tester', '대학생')

    def test_duplicate_provider_rejected(self, app, user):
        import auth
        from exceptions import UserErrorStatus, UserException
        from services import user_service

        with pytest.raises(UserException) as exc_info:
            user_service.register_user(Response(), auth.generate_register_token(user.provider_id), 'again', '대학생')

        assert exc_info.value.status == UserErrorStatus.ALREADY_EXIST_USER

    @pytest.mark.parametrize('nick_name', ['', 'a' * 11, 'bad!name', 'emoji😀', 123, 'a\u3000b', 'a\xa0b'])
    def test_invalid_nickname(self, app, nick_name):
        import auth
        from exceptions import UserErrorStatus, UserException
        from services import user_service

        with pytest.raises(UserException) as exc_info:
            user_service.register_user(Response(), auth.generate_register_token('kakao-nick'), nick_name, '대학생')

        assert exc_info.value.status == UserErrorStatus.INVALID_USER_NICKNAME

    def test_nickname_with_space(self, app):
        import auth
        from services import user_service

        user_dto = user_service.register_user(Response(), auth.generate_register_token('kakao-space'), '김 철수', '대학생')

        assert user_dto.nick_name == '김 철수'

    def test_invalid_status(self, app):
        import auth
        from exceptions import UserErrorStatus, UserException
        from services import user_service

        with pytest.raises(UserException) as exc_info:
            user_service.register_user(Response(), auth.generate_register_token('kakao-status'), 'tester', '학생')

        assert exc_info.value.status == UserErrorStatus.INVALID_USER_STATUS


class TestLogoutAndDelete:
    """Tests for session teardown"""

    def test_logout_removes_refresh_token_and_clears_cookies(self, app, user, fake_redis):
        import auth
        from services import user_service

        refresh_token = auth.generate_refresh_token(user.id)
        user_service.save_refresh_token(refresh_token, user.id)

        response = Response()
        with app.test_request_context(headers={'Cookie': f'refreshToken={refresh_token}'}):
            from flask import request
            user_service.logout_user(request, response)

        assert fake_redis.dbsize() == 0
        cookies = _cookies(response)
        assert 'Max-Age=0' in cookies['accessToken']
        assert 'Max-Age=0' in cookies['refreshToken']

    def test_logout_without_cookie(self, app, fake_redis):
        from services import user_service

        response = Response()
        with app.test_request_context():
            from flask import request
            user_service.logout_user(request, response)

        assert len(response.headers.getlist('Set-Cookie')) == 2

    def test_delete_user_removes_row(self, app, user, folder):
        from models.folder import Folder
        from repositories.user_repository import UserRepository
        from services import user_service

        user_id = user.id
        with app.test_request_context():
            from flask import request
            user_service.delete_user(request, Response(), user_id)

        assert UserRepository.get_by_id(user_id) is None
        assert Folder.query.filter_by(user_id=user_id).count() == 0


class TestUpdateAndInfo:
    """Tests for profile edits and info"""

    def test_partial_update(self, app, user):
        from services import user_service

        user_dto = user_service.update_user(user.id, nick_name='새이름')

        assert user_dto.nick_name == '새이름'
        assert user_dto.status == '대학생'

    def test_update_status(self, app, user):
        from services import user_service

        assert user_service.update_user(user.id, status='취업준비생').status == '취업준비생'

    def test_update_invalid_nickname(self, app, user):
        from exceptions import UserException
        from services import user_service

        with pytest.raises(UserException):
            user_service.update_user(user.id, nick_name='x' * 20)

    def test_record_count_excludes_temporary_records(self, app, user, analysis):
        from services import record_service, user_service

        record_service.save_tmp_memo(user.id, '임시', '임시 내용')

        info = user_service.get_user_info(user.id)

        assert info.record_count == 1
        assert info.nick_name == 'tester'

    def test_unknown_user(self, app):
        from exceptions import ErrorStatus, GeneralException
        from services import user_service

        with pytest.raises(GeneralException) as exc_info:
            user_service.get_user_info(404)

        assert exc_info.value.status == ErrorStatus.UNAUTHORIZED
