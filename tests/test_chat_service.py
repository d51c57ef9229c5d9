"""
Tests for chat rooms, AI replies, summaries and the temporary chat
"""
import pytest


@pytest.fixture
def chat_room_id(user):
    from services import chat_service

    return chat_service.create_chat_room(user.id).chat_room_id


class TestChatRoom:

    def test_room_opens_with_greeting(self, app, user):
        from services import chat_service

        dto = chat_service.create_chat_room(user.id)

        assert dto.first_chat.author == 'assistant'
        assert dto.first_chat.content.startswith('tester님')

    def test_chat_stores_message_and_reply(self, app, user, chat_room_id, ai_client):
        from services import chat_service

        reply = chat_service.create_chat(user.id, chat_room_id, '동아리 회의를 진행했어요')

        assert [chat.content for chat in reply.chats] == ['그때 어떤 역할을 맡으셨나요?']
        messages = ai_client.generate_chat_response.call_args[0][0]
        assert messages[-1] == {'role': 'user', 'content': '동아리 회의를 진행했어요'}
        assert messages[0]['role'] == 'assistant'

        history = chat_service.get_chat_list(user.id, chat_room_id).chats
        assert [chat.author for chat in history] == ['assistant', 'user', 'assistant']

    @pytest.mark.parametrize('content', ['   ', 5])
    def test_empty_message(self, app, user, chat_room_id, content):
        from exceptions import ChatErrorStatus, ChatException
        from services import chat_service

        with pytest.raises(ChatException) as exc_info:
            chat_service.create_chat(user.id, chat_room_id, content)

        assert exc_info.value.status == ChatErrorStatus.EMPTY_CHAT_CONTENT

    def test_ai_failure_keeps_history_unchanged(self, app, user, chat_room_id, ai_client):
        from ai_client import AiClientException
        from exceptions import ChatErrorStatus, ChatException
        from services import chat_service

        ai_client.generate_chat_response.side_effect = AiClientException('timeout')

        with pytest.raises(ChatException) as exc_info:
            chat_service.create_chat(user.id, chat_room_id, '안녕하세요')

        assert exc_info.value.status == ChatErrorStatus.INVALID_AI_RESPONSE
        assert len(chat_service.get_chat_list(user.id, chat_room_id).chats) == 1

    def test_foreign_room(self, app, chat_room_id, other_user):
        from exceptions import ChatErrorStatus, ChatException
        from services import chat_service

        with pytest.raises(ChatException) as exc_info:
            chat_service.get_chat_list(other_user.id, chat_room_id)

        assert exc_info.value.status == ChatErrorStatus.USER_CHAT_ROOM_UNAUTHORIZED

    def test_delete_room(self, app, user, chat_room_id):
        from exceptions import ChatErrorStatus, ChatException
        from models.chat import Chat
        from services import chat_service

        chat_service.delete_chat_room(user.id, chat_room_id)

        assert Chat.query.count() == 0
        with pytest.raises(ChatException) as exc_info:
            chat_service.get_chat_list(user.id, chat_room_id)
        assert exc_info.value.status == ChatErrorStatus.CHAT_ROOM_NOT_FOUND


class TestChatSummary:

    def test_summary(self, app, user, chat_room_id, ai_client):
        from services import chat_service

        chat_service.create_chat(user.id, chat_room_id, '동아리 회의를 진행했어요')

        summary = chat_service.get_chat_summary(user.id, chat_room_id)

        assert summary.title == '동아리 프로젝트 회의'
        assert summary.chat_room_id == chat_room_id

    def test_greeting_only_is_not_enough(self, app, user, chat_room_id):
        from exceptions import ChatErrorStatus, ChatException
        from services import chat_service

        with pytest.raises(ChatException) as exc_info:
            chat_service.get_chat_summary(user.id, chat_room_id)

        assert exc_info.value.status == ChatErrorStatus.NOT_ENOUGH_CHAT


class TestChatRecord:

    def test_chat_transcript_becomes_record(self, app, user, folder, chat_room_id, ai_client):
        from services import chat_service, record_service

        chat_service.create_chat(user.id, chat_room_id, '동아리 회의를 진행했어요')
        chat_service.create_chat(user.id, chat_room_id, '일정 문제를 해결했어요')

        dto = record_service.create_chat_record(user.id, '회의 경험', chat_room_id, folder.id)

        assert dto.record_content == '동아리 회의를 진행했어요\n일정 문제를 해결했어요'
        records = record_service.get_record_list(user.id).record_dto_list
        assert [record.type for record in records] == ['CHAT']


class TestTmpChat:

    def test_save_and_read_once(self, app, user, chat_room_id):
        from services import chat_service

        chat_service.save_tmp_chat(user.id, chat_room_id)

        first = chat_service.get_tmp_chat(user.id)
        second = chat_service.get_tmp_chat(user.id)

        assert first.is_exist is True
        assert first.chat_room_id == chat_room_id
        assert second.is_exist is False

    def test_only_one_temporary_chat(self, app, user, chat_room_id):
        from exceptions import RecordErrorStatus, RecordException
        from services import chat_service

        chat_service.save_tmp_chat(user.id, chat_room_id)

        with pytest.raises(RecordException) as exc_info:
            chat_service.save_tmp_chat(user.id, chat_room_id)

        assert exc_info.value.status == RecordErrorStatus.ALREADY_TMP_CHAT

    def test_deleting_room_forgets_temporary_chat(self, app, user, chat_room_id):
        from repositories.user_repository import UserRepository
        from services import chat_service

        chat_service.save_tmp_chat(user.id, chat_room_id)
        chat_service.delete_chat_room(user.id, chat_room_id)

        assert UserRepository.get_by_id(user.id).tmp_chat is None
