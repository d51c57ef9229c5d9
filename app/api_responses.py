"""
API Response Utilities - Standardized success envelopes

Every success response has the same shape as the error envelope plus the
payload: {"status": <http status>, "code": <S-code>, "message": ..., "data": ...}
"""

import enum
import json
from dataclasses import asdict, is_dataclass

from flask import Response, request

from exceptions import ErrorStatus, GeneralException, StatusMixin, JSON_UTF8


class SuccessStatus(StatusMixin, enum.Enum):
    USER_REGISTER_SUCCESS = (201, "S101", "회원가입이 성공적으로 완료되었습니다.")
    USER_LOGOUT_SUCCESS = (200, "S102", "로그아웃이 성공적으로 완료되었습니다.")
    USER_DELETE_SUCCESS = (200, "S103", "회원탈퇴가 성공적으로 완료되었습니다.")
    USER_UPDATE_SUCCESS = (200, "S104", "회원 정보 수정이 성공적으로 완료되었습니다.")
    GET_USER_INFO_SUCCESS = (200, "S105", "회원 정보 조회가 성공적으로 완료되었습니다.")

    LOGIN_SUCCESS = (200, "S201", "로그인이 성공적으로 완료되었습니다.")
    ACCESS_TOKEN_REISSUE_SUCCESS = (200, "S202", "토큰 재발급이 성공적으로 완료되었습니다.")
    TMP_TOKEN_ISSUE_SUCCESS = (200, "S203", "임시 토큰 발급이 성공적으로 완료되었습니다.")

    FOLDER_CREATE_SUCCESS = (201, "S401", "폴더 생성이 성공적으로 완료되었습니다.")
    FOLDER_UPDATE_SUCCESS = (200, "S402", "폴더 수정이 성공적으로 완료되었습니다.")
    FOLDER_DELETE_SUCCESS = (200, "S403", "폴더 삭제가 성공적으로 완료되었습니다.")
    GET_FOLDER_LIST_SUCCESS = (200, "S404", "폴더 목록 조회가 성공적으로 완료되었습니다.")

    RECORD_CREATE_SUCCESS = (201, "S801", "경험 기록이 성공적으로 완료되었습니다.")
    GET_RECORD_SUCCESS = (200, "S802", "경험 기록 조회가 성공적으로 완료되었습니다.")
    TMP_MEMO_SAVE_SUCCESS = (200, "S803", "메모 임시 저장이 성공적으로 완료되었습니다.")
    GET_TMP_MEMO_SUCCESS = (200, "S804", "임시 저장 메모 조회가 성공적으로 완료되었습니다.")
    RECORD_FOLDER_UPDATE_SUCCESS = (200, "S805", "경험 기록 폴더 변경이 성공적으로 완료되었습니다.")
    GET_RECORD_LIST_SUCCESS = (200, "S806", "경험 기록 목록 조회가 성공적으로 완료되었습니다.")

    ANALYSIS_CREATE_SUCCESS = (201, "S501", "역량 분석이 성공적으로 완료되었습니다.")
    GET_ANALYSIS_SUCCESS = (200, "S502", "역량 분석 조회가 성공적으로 완료되었습니다.")
    ANALYSIS_UPDATE_SUCCESS = (200, "S503", "역량 분석 수정이 성공적으로 완료되었습니다.")
    ANALYSIS_DELETE_SUCCESS = (200, "S504", "역량 분석 삭제가 성공적으로 완료되었습니다.")

    GET_KEYWORD_LIST_SUCCESS = (200, "S601", "역량 키워드 목록 조회가 성공적으로 완료되었습니다.")
    GET_KEYWORD_GRAPH_SUCCESS = (200, "S602", "역량 키워드 통계 조회가 성공적으로 완료되었습니다.")

    CHAT_ROOM_CREATE_SUCCESS = (201, "S301", "채팅방 생성이 성공적으로 완료되었습니다.")
    CHAT_CREATE_SUCCESS = (201, "S302", "채팅 생성이 성공적으로 완료되었습니다.")
    GET_CHAT_SUCCESS = (200, "S303", "채팅 조회가 성공적으로 완료되었습니다.")
    CHAT_DELETE_SUCCESS = (200, "S304", "채팅방 삭제가 성공적으로 완료되었습니다.")
    GET_CHAT_SUMMARY_SUCCESS = (200, "S305", "채팅 요약이 성공적으로 완료되었습니다.")
    TMP_CHAT_SAVE_SUCCESS = (200, "S306", "채팅 임시 저장이 성공적으로 완료되었습니다.")
    GET_TMP_CHAT_SUCCESS = (200, "S307", "임시 저장 채팅 조회가 성공적으로 완료되었습니다.")


def _camel_case(name):
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _camel_case_dict(fields):
    return {_camel_case(key): value for key, value in fields}


def _serialize(data):
    """DTO dataclasses go out with camelCase keys, matching the request bodies"""
    if is_dataclass(data):
        return asdict(data, dict_factory=_camel_case_dict)
    if isinstance(data, (list, tuple)):
        return [_serialize(item) for item in data]
    return data


def success_response(status, data=None, response=None):
    """
    Standard success response for API endpoints.

    `response` lets a route hand over a Response that already carries
    Set-Cookie headers; its body and status are replaced.
    """
    body = {
        "status": status.http_status,
        "code": status.code,
        "message": status.message,
        "data": _serialize(data),
    }
    if response is None:
        response = Response(content_type=JSON_UTF8)
    response.set_data(json.dumps(body, ensure_ascii=False))
    response.status_code = status.http_status
    response.content_type = JSON_UTF8
    return response


def get_json_body(*required):
    """JSON body of the current request; missing required fields are a bad request"""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}
    if any(body.get(field) is None for field in required):
        raise GeneralException(ErrorStatus.BAD_REQUEST)
    return body


def int_field(body, name):
    """Integer id from a JSON body; accepts a JSON number or a string of digits"""
    value = body.get(name)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    raise GeneralException(ErrorStatus.BAD_REQUEST)


def str_field(body, name):
    """String field from a JSON body; anything else is a bad request"""
    value = body.get(name)
    if not isinstance(value, str):
        raise GeneralException(ErrorStatus.BAD_REQUEST)
    return value
