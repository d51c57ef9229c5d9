"""
Tests for error catalogs, domain exceptions and the error boundary
"""
import json

import pytest


class TestCatalogs:

    def test_codes_are_unique(self):
        from api_responses import SuccessStatus
        from exceptions import (
            AbilityErrorStatus,
            AnalysisErrorStatus,
            ChatErrorStatus,
            ErrorStatus,
            FolderErrorStatus,
            RecordErrorStatus,
            TokenErrorStatus,
            UserErrorStatus,
        )

        catalogs = [ErrorStatus, UserErrorStatus, TokenErrorStatus, FolderErrorStatus, RecordErrorStatus,
                    AnalysisErrorStatus, AbilityErrorStatus, ChatErrorStatus, SuccessStatus]
        codes = [status.code for catalog in catalogs for status in catalog]

        assert len(codes) == len(set(codes))

    def test_status_accessors(self):
        from exceptions import AbilityErrorStatus

        status = AbilityErrorStatus.INVALID_ABILITY_KEYWORD
        assert status.http_status == 400
        assert status.code == 'E0601'
        assert status.message

    def test_exception_requires_own_catalog(self):
        from exceptions import AbilityException, UserErrorStatus

        with pytest.raises(TypeError):
            AbilityException(UserErrorStatus.ALREADY_EXIST_USER)

    def test_exception_to_dict(self):
        from exceptions import UserErrorStatus, UserException

        error = UserException(UserErrorStatus.ALREADY_EXIST_USER)

        assert error.to_dict() == {'status': 409, 'code': 'E0101', 'message': '이미 존재하는 유저입니다.'}


class TestErrorBoundary:

    def test_access_denied_envelope(self, app):
        from flask import abort

        app.add_url_rule('/api/forbidden', 'forbidden', lambda: abort(403))

        response = app.test_client().get('/api/forbidden')

        assert response.status_code == 403
        assert response.headers['Content-Type'] == 'application/json; charset=utf-8'
        assert json.loads(response.data) == {'status': 403, 'code': 'E0403', 'message': '접근 권한이 없습니다.'}
        # Korean messages are sent as UTF-8, not \u escapes
        assert '접근 권한이 없습니다.'.encode('utf-8') in response.data

    def test_unexpected_error_becomes_500(self, app):
        def broken():
            raise RuntimeError('boom')

        app.add_url_rule('/api/broken', 'broken', broken)

        response = app.test_client().get('/api/broken')

        assert response.status_code == 500
        assert json.loads(response.data)['code'] == 'E0500'

    def test_domain_error_status(self, app):
        from exceptions import AnalysisErrorStatus, AnalysisException

        def failing():
            raise AnalysisException(AnalysisErrorStatus.INVALID_AI_RESPONSE)

        app.add_url_rule('/api/failing', 'failing', failing)

        response = app.test_client().get('/api/failing')

        assert response.status_code == 502
        assert json.loads(response.data)['code'] == 'E0505'
