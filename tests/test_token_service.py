"""
Tests for login, refresh token rotation and JWT helpers
"""
import pytest
from flask import Response, request


def _set_cookies(response):
    return {header.split('=', 1)[0]: header.split(';', 1)[0].split('=', 1)[1]
            for header in response.headers.getlist('Set-Cookie')}


class TestLogin:
    """Tests for provider login"""

    def test_registered_user_gets_session(self, app, user, fake_redis):
        from services import token_service

        response = Response()
        login_dto = token_service.login_with_provider(response, user.provider_id)

        assert login_dto.registered is True
        assert login_dto.register_token is None
        assert set(_set_cookies(response)) == {'accessToken', 'refreshToken'}
        assert fake_redis.dbsize() == 1

    def test_unknown_account_gets_register_token(self, app, fake_redis):
        import auth
        from services import token_service

        response = Response()
        login_dto = token_service.login_with_provider(response, 'kakao-unknown')

        assert login_dto.registered is False
        assert auth.get_provider_id_from_token(login_dto.register_token) == 'kakao-unknown'
        assert response.headers.getlist('Set-Cookie') == []
        assert fake_redis.dbsize() == 0


class TestReissue:
    """Tests for access token reissue"""

    def test_rotates_refresh_token(self, app, user, fake_redis):
        import auth
        from services import token_service, user_service

        old_token = auth.generate_refresh_token(user.id)
        user_service.save_refresh_token(old_token, user.id)

        response = Response()
        with app.test_request_context(headers={'Cookie': f'refreshToken={old_token}'}):
            token_service.reissue_access_token(request, response)

        cookies = _set_cookies(response)
        new_token = cookies['refreshToken']
        assert new_token != old_token
        assert not fake_redis.exists(f'refreshToken:{old_token}')
        assert fake_redis.get(f'refreshToken:{new_token}') == str(user.id)
        assert auth.get_user_id_from_access_token(cookies['accessToken']) == user.id

    def test_invalid_refresh_token(self, app):
        from exceptions import TokenErrorStatus, TokenException
        from services import token_service

        with app.test_request_context(headers={'Cookie': 'refreshToken=garbage'}):
            with pytest.raises(TokenException) as exc_info:
                token_service.reissue_access_token(request, Response())

        assert exc_info.value.status == TokenErrorStatus.INVALID_REFRESH_TOKEN

    def test_missing_cookie(self, app):
        from exceptions import TokenErrorStatus, TokenException
        from services import token_service

        with app.test_request_context():
            with pytest.raises(TokenException) as exc_info:
                token_service.reissue_access_token(request, Response())

        assert exc_info.value.status == TokenErrorStatus.INVALID_REFRESH_TOKEN

    def test_refresh_token_not_stored(self, app, user):
        import auth
        from exceptions import TokenErrorStatus, TokenException
        from services import token_service

        token = auth.generate_refresh_token(user.id)
        with app.test_request_context(headers={'Cookie': f'refreshToken={token}'}):
            with pytest.raises(TokenException) as exc_info:
                token_service.reissue_access_token(request, Response())

        assert exc_info.value.status == TokenErrorStatus.REFRESH_TOKEN_NOT_FOUND

    def test_used_refresh_token_cannot_be_replayed(self, app, user):
        import auth
        from exceptions import TokenErrorStatus, TokenException
        from services import token_service, user_service

        token = auth.generate_refresh_token(user.id)
        user_service.save_refresh_token(token, user.id)
        with app.test_request_context(headers={'Cookie': f'refreshToken={token}'}):
            token_service.reissue_access_token(request, Response())
            with pytest.raises(TokenException) as exc_info:
                token_service.reissue_access_token(request, Response())

        assert exc_info.value.status == TokenErrorStatus.REFRESH_TOKEN_NOT_FOUND


class TestTmpToken:
    """Tests for development tokens"""

    def test_tmp_token_authenticates_user(self, app, user):
        import auth
        from services import token_service

        token = token_service.issue_tmp_token(user.id)

        assert auth.get_user_id_from_access_token(token) == user.id

    def test_unknown_user(self, app):
        from exceptions import GeneralException
        from services import token_service

        with pytest.raises(GeneralException):
            token_service.issue_tmp_token(12345)


class TestJwt:
    """Tests for token type separation"""

    def test_token_types_are_not_interchangeable(self, app, user):
        import auth

        access = auth.generate_access_token(user.id)
        refresh = auth.generate_refresh_token(user.id)

        assert auth.is_access_token_valid(access)
        assert not auth.is_refresh_token_valid(access)
        assert auth.is_refresh_token_valid(refresh)
        assert not auth.is_access_token_valid(refresh)
        assert not auth.is_register_token_valid(access)

    def test_expired_token_is_invalid(self, app, user):
        import auth

        app.config['ACCESS_TOKEN_EXPIRATION'] = -10

        assert not auth.is_access_token_valid(auth.generate_access_token(user.id))

    def test_foreign_secret_is_invalid(self, app, user):
        import jwt
        import auth

        forged = jwt.encode({'userId': str(user.id), 'type': 'access'}, 'other-secret', algorithm='HS256')

        assert auth.get_user_id_from_access_token(forged) is None
