"""
Corecord - Error catalogs, domain exceptions and exception handlers

Every domain owns a closed catalog of error statuses. A status carries the
HTTP status it maps to, a stable error code and a human readable message.
Domain exceptions carry exactly one status of their own catalog.
"""
import enum
import json

import structlog
from flask import Response
from werkzeug.exceptions import HTTPException

logger = structlog.get_logger('exceptions')

JSON_UTF8 = 'application/json; charset=utf-8'


class StatusMixin:
    """Accessors shared by all status catalogs; values are (http_status, code, message)."""

    @property
    def http_status(self):
        return self.value[0]

    @property
    def code(self):
        return self.value[1]

    @property
    def message(self):
        return self.value[2]


class ErrorStatus(StatusMixin, enum.Enum):
    BAD_REQUEST = (400, "E0400", "잘못된 요청입니다.")
    UNAUTHORIZED = (401, "E0401", "인증이 필요합니다.")
    FORBIDDEN = (403, "E0403", "접근 권한이 없습니다.")
    NOT_FOUND = (404, "E0404", "요청한 리소스를 찾을 수 없습니다.")
    METHOD_NOT_ALLOWED = (405, "E0405", "허용되지 않은 메서드입니다.")
    TOO_MANY_REQUESTS = (429, "E0429", "요청이 너무 많습니다.")
    INTERNAL_SERVER_ERROR = (500, "E0500", "서버 내부 오류가 발생했습니다.")


class UserErrorStatus(StatusMixin, enum.Enum):
    ALREADY_EXIST_USER = (409, "E0101", "이미 존재하는 유저입니다.")
    INVALID_USER_NICKNAME = (400, "E0102", "닉네임은 10자 이내의 한글, 영어, 숫자, 공백만 가능합니다.")
    INVALID_USER_STATUS = (400, "E0103", "유효하지 않은 유저 상태입니다.")


class TokenErrorStatus(StatusMixin, enum.Enum):
    INVALID_REGISTER_TOKEN = (401, "E0201", "유효하지 않은 회원가입 토큰입니다.")
    INVALID_ACCESS_TOKEN = (401, "E0202", "유효하지 않은 액세스 토큰입니다.")
    INVALID_REFRESH_TOKEN = (401, "E0203", "유효하지 않은 리프레시 토큰입니다.")
    REFRESH_TOKEN_NOT_FOUND = (404, "E0204", "리프레시 토큰이 존재하지 않습니다.")


class FolderErrorStatus(StatusMixin, enum.Enum):
    FOLDER_NOT_FOUND = (404, "E0301", "존재하지 않는 폴더입니다.")
    DUPLICATED_FOLDER_TITLE = (409, "E0302", "이미 존재하는 폴더 이름입니다.")
    INVALID_FOLDER_TITLE = (400, "E0303", "폴더 이름은 1자 이상 15자 이내여야 합니다.")
    USER_FOLDER_UNAUTHORIZED = (403, "E0304", "해당 폴더에 접근할 권한이 없습니다.")


class RecordErrorStatus(StatusMixin, enum.Enum):
    RECORD_NOT_FOUND = (404, "E0801", "존재하지 않는 경험 기록입니다.")
    USER_RECORD_UNAUTHORIZED = (403, "E0802", "해당 경험 기록에 접근할 권한이 없습니다.")
    OVERFLOW_MEMO_RECORD_TITLE = (400, "E0803", "경험 기록 제목은 50자 이내여야 합니다.")
    OVERFLOW_MEMO_RECORD_CONTENT = (400, "E0804", "경험 기록 내용은 500자 이내여야 합니다.")
    NOT_ENOUGH_MEMO_RECORD_CONTENT = (400, "E0805", "경험 기록 내용은 30자 이상이어야 합니다.")
    ALREADY_TMP_MEMO = (409, "E0806", "이미 임시 저장된 메모가 존재합니다.")
    ALREADY_TMP_CHAT = (409, "E0807", "이미 임시 저장된 채팅이 존재합니다.")
    INVALID_RECORD_TYPE = (400, "E0808", "요청과 일치하지 않는 경험 기록 유형입니다.")


class AnalysisErrorStatus(StatusMixin, enum.Enum):
    ANALYSIS_NOT_FOUND = (404, "E0501", "존재하지 않는 역량 분석입니다.")
    USER_ANALYSIS_UNAUTHORIZED = (403, "E0502", "해당 역량 분석에 접근할 권한이 없습니다.")
    OVERFLOW_ANALYSIS_COMMENT = (500, "E0503", "역량 분석 코멘트는 200자 이내여야 합니다.")
    OVERFLOW_ANALYSIS_KEYWORD_CONTENT = (400, "E0504", "역량 키워드 내용은 200자 이내여야 합니다.")
    INVALID_AI_RESPONSE = (502, "E0505", "AI 분석 결과를 처리할 수 없습니다.")


class AbilityErrorStatus(StatusMixin, enum.Enum):
    INVALID_ABILITY_KEYWORD = (400, "E0601", "유효하지 않은 역량 키워드입니다.")


class ChatErrorStatus(StatusMixin, enum.Enum):
    CHAT_ROOM_NOT_FOUND = (404, "E0701", "존재하지 않는 채팅방입니다.")
    USER_CHAT_ROOM_UNAUTHORIZED = (403, "E0702", "해당 채팅방에 접근할 권한이 없습니다.")
    EMPTY_CHAT_CONTENT = (400, "E0703", "채팅 내용이 비어 있습니다.")
    NOT_ENOUGH_CHAT = (400, "E0704", "요약할 채팅 내용이 부족합니다.")
    INVALID_AI_RESPONSE = (502, "E0705", "AI 응답을 처리할 수 없습니다.")


class CorecordException(Exception):
    """Base exception for Corecord; carries one error status variant"""

    status_type = None

    def __init__(self, status):
        if self.status_type is not None and not isinstance(status, self.status_type):
            raise TypeError(f"{type(self).__name__} requires a {self.status_type.__name__}, got {status!r}")
        self.status = status
        super().__init__(status.message)

    @property
    def http_status(self):
        return self.status.http_status

    @property
    def code(self):
        return self.status.code

    @property
    def message(self):
        return self.status.message

    def to_dict(self):
        return {
            'status': self.http_status,
            'code': self.code,
            'message': self.message
        }


class GeneralException(CorecordException):
    status_type = ErrorStatus


class UserException(CorecordException):
    status_type = UserErrorStatus


class TokenException(CorecordException):
    status_type = TokenErrorStatus


class FolderException(CorecordException):
    status_type = FolderErrorStatus


class RecordException(CorecordException):
    status_type = RecordErrorStatus


class AnalysisException(CorecordException):
    status_type = AnalysisErrorStatus


class AbilityException(CorecordException):
    status_type = AbilityErrorStatus


class ChatException(CorecordException):
    status_type = ChatErrorStatus


def error_body(status):
    return {
        'status': status.http_status,
        'code': status.code,
        'message': status.message
    }


def json_error(body, http_status):
    """Serialize an error envelope as UTF-8 JSON; messages are Korean, keep them readable."""
    return Response(
        json.dumps(body, ensure_ascii=False),
        status=http_status,
        content_type=JSON_UTF8,
    )


def access_denied_response():
    return json_error(error_body(ErrorStatus.FORBIDDEN), 403)


def unauthorized_response():
    return json_error(error_body(ErrorStatus.UNAUTHORIZED), 401)


_HTTP_STATUS_TO_ERROR = {status.http_status: status for status in ErrorStatus}


def register_exception_handlers(app):
    """Register exception handlers with Flask app"""

    @app.errorhandler(CorecordException)
    def handle_corecord_exception(e):
        """Handle domain exceptions"""
        if e.http_status >= 500:
            logger.error("domain_error", code=e.code, message=e.message)
        else:
            logger.warning("domain_error", code=e.code, message=e.message)
        return json_error(e.to_dict(), e.http_status)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Handle HTTP exceptions"""
        if e.code == 403:
            return access_denied_response()
        status = _HTTP_STATUS_TO_ERROR.get(e.code)
        if status is None:
            return json_error({
                'status': e.code,
                'code': e.name.upper().replace(' ', '_'),
                'message': e.description
            }, e.code)
        return json_error(error_body(status), e.code)

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        """Handle all other exceptions"""
        logger.error("unhandled_exception", error=str(e), exc_info=True)
        return json_error(error_body(ErrorStatus.INTERNAL_SERVER_ERROR), 500)
