"""
Tests for record analysis via the AI service
"""
import pytest

from conftest import COMMUNICATION, LEADERSHIP, MEMO_CONTENT, PROBLEM_SOLVING


@pytest.fixture
def analyzed(user, folder):
    """A memo record analyzed by the AI double; returns its AnalysisDto"""
    from services import record_service

    return record_service.create_memo_record(user.id, '프로젝트 회의', MEMO_CONTENT, folder.id)


class TestCreateAnalysis:

    def test_comment_too_long(self, app, user, folder, ai_client):
        from exceptions import AnalysisErrorStatus, AnalysisException
        from services import record_service

        ai_client.generate_analysis.return_value = {'comment': 'x' * 201, 'keywordList': {COMMUNICATION: 'a'}}

        with pytest.raises(AnalysisException) as exc_info:
            record_service.create_memo_record(user.id, '제목', MEMO_CONTENT, folder.id)

        assert exc_info.value.status == AnalysisErrorStatus.OVERFLOW_ANALYSIS_COMMENT

    def test_empty_keyword_list(self, app, user, folder, ai_client):
        from exceptions import AbilityErrorStatus, AbilityException
        from services import record_service

        ai_client.generate_analysis.return_value = {'comment': '코멘트', 'keywordList': {}}

        with pytest.raises(AbilityException) as exc_info:
            record_service.create_memo_record(user.id, '제목', MEMO_CONTENT, folder.id)

        assert exc_info.value.status == AbilityErrorStatus.INVALID_ABILITY_KEYWORD


class TestGetAnalysis:

    def test_get(self, app, user, analyzed):
        from services import analysis_service

        dto = analysis_service.get_analysis(user.id, analyzed.analysis_id)

        assert dto.record_id == analyzed.record_id
        assert dto.comment == '회의를 주도하며 문제를 해결한 경험이 돋보입니다.'

    def test_foreign_analysis(self, app, analyzed, other_user):
        from exceptions import AnalysisErrorStatus, AnalysisException
        from services import analysis_service

        with pytest.raises(AnalysisException) as exc_info:
            analysis_service.get_analysis(other_user.id, analyzed.analysis_id)

        assert exc_info.value.status == AnalysisErrorStatus.USER_ANALYSIS_UNAUTHORIZED

    def test_missing_analysis(self, app, user):
        from exceptions import AnalysisErrorStatus, AnalysisException
        from services import analysis_service

        with pytest.raises(AnalysisException) as exc_info:
            analysis_service.get_analysis(user.id, 77)

        assert exc_info.value.status == AnalysisErrorStatus.ANALYSIS_NOT_FOUND


class TestRecreateAnalysis:

    def test_replaces_abilities(self, app, user, analyzed, ai_client):
        from models.ability import Ability
        from services import analysis_service

        ai_client.generate_analysis.return_value = {'comment': '새 코멘트', 'keywordList': {LEADERSHIP: '리더 역할'}}

        dto = analysis_service.recreate_analysis(user.id, analyzed.analysis_id)

        assert dto.comment == '새 코멘트'
        assert [ability.keyword for ability in dto.ability_dto_list] == [LEADERSHIP]
        assert Ability.query.filter_by(analysis_id=analyzed.analysis_id).count() == 1

    def test_failed_reanalysis_keeps_abilities(self, app, user, analyzed, ai_client):
        from exceptions import AbilityException
        from services import analysis_service

        ai_client.generate_analysis.return_value = {'comment': '새 코멘트', 'keywordList': {'BadLabel': 'x'}}

        with pytest.raises(AbilityException):
            analysis_service.recreate_analysis(user.id, analyzed.analysis_id)

        dto = analysis_service.get_analysis(user.id, analyzed.analysis_id)
        assert [ability.keyword for ability in dto.ability_dto_list] == [COMMUNICATION, PROBLEM_SOLVING]
        assert dto.comment == analyzed.comment


class TestUpdateAnalysis:

    def test_update_comment_and_ability(self, app, user, analyzed):
        from services import analysis_service

        dto = analysis_service.update_analysis(
            user.id, analyzed.analysis_id, comment='수정한 코멘트', ability_map={COMMUNICATION: '수정한 내용'}
        )

        assert dto.comment == '수정한 코멘트'
        contents = {ability.keyword: ability.content for ability in dto.ability_dto_list}
        assert contents[COMMUNICATION] == '수정한 내용'

    def test_keyword_not_in_analysis(self, app, user, analyzed):
        from exceptions import AbilityErrorStatus, AbilityException
        from services import analysis_service

        with pytest.raises(AbilityException) as exc_info:
            analysis_service.update_analysis(user.id, analyzed.analysis_id, ability_map={LEADERSHIP: '없음'})

        assert exc_info.value.status == AbilityErrorStatus.INVALID_ABILITY_KEYWORD


    @pytest.mark.parametrize('changes', [{'comment': 3}, {'ability_map': [COMMUNICATION]}])
    def test_malformed_changes(self, app, user, analyzed, changes):
        from exceptions import ErrorStatus, GeneralException
        from services import analysis_service

        with pytest.raises(GeneralException) as exc_info:
            analysis_service.update_analysis(user.id, analyzed.analysis_id, **changes)

        assert exc_info.value.status == ErrorStatus.BAD_REQUEST

    def test_non_text_ability_content(self, app, user, analyzed):
        from exceptions import AnalysisErrorStatus, AnalysisException
        from services import analysis_service

        with pytest.raises(AnalysisException) as exc_info:
            analysis_service.update_analysis(user.id, analyzed.analysis_id, ability_map={COMMUNICATION: 42})

        assert exc_info.value.status == AnalysisErrorStatus.OVERFLOW_ANALYSIS_KEYWORD_CONTENT


class TestDeleteAnalysis:

    def test_deletes_record_too(self, app, user, analyzed):
        from models.ability import Ability
        from models.analysis import Analysis
        from models.record import Record
        from services import analysis_service

        analysis_service.delete_analysis(user.id, analyzed.analysis_id)

        assert Analysis.query.count() == 0
        assert Record.query.count() == 0
        assert Ability.query.count() == 0
