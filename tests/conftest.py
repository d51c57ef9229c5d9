"""
Pytest fixtures and configuration for Corecord tests
"""
import os
import sys
import fakeredis
import pytest
from unittest.mock import MagicMock

# Add app directory to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'app'))

# Keep tests from generating a persistent secret key on disk
os.environ.setdefault('JWT_SECRET', 'test-jwt-secret')

COMMUNICATION = '커뮤니케이션'
PROBLEM_SOLVING = '문제해결'
LEADERSHIP = '리더십'

MEMO_CONTENT = '동아리 프로젝트에서 팀원들과 매주 회의를 진행하며 일정 문제를 해결했습니다.'


@pytest.fixture
def fake_redis():
    """In-memory Redis with its own server, so no state leaks between tests"""
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def ai_client():
    """AI client double answering with a fixed analysis, reply and summary"""
    client = MagicMock()
    client.generate_analysis.return_value = {
        'comment': '회의를 주도하며 문제를 해결한 경험이 돋보입니다.',
        'keywordList': {
            PROBLEM_SOLVING: '일정 충돌 문제를 회의로 해결했습니다.',
            COMMUNICATION: '팀원들과 주기적으로 소통했습니다.',
        },
    }
    client.generate_chat_response.return_value = '그때 어떤 역할을 맡으셨나요?'
    client.generate_chat_summary.return_value = {
        'title': '동아리 프로젝트 회의',
        'content': '매주 회의를 진행하며 일정 문제를 해결한 경험',
    }
    return client


@pytest.fixture
def app(fake_redis, ai_client):
    """Application on an in-memory SQLite database with Redis and AI doubles"""
    from app import create_app
    from db import db

    _app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'JWT_SECRET': 'test-jwt-secret',
        'RATELIMIT_ENABLED': False,
        'TMP_TOKEN_ENABLED': True,
        'REDIS_CLIENT': fake_redis,
        'AI_CLIENT': ai_client,
    })

    with _app.app_context():
        yield _app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client that never stores cookies; tests send them explicitly"""
    return app.test_client(use_cookies=False)


@pytest.fixture
def user(app):
    from db import db
    from models.user import User, Status

    user = User(provider_id='kakao-1001', nick_name='tester', status=Status.UNIVERSITY_STUDENT)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def other_user(app):
    from db import db
    from models.user import User, Status

    user = User(provider_id='kakao-2002', nick_name='other', status=Status.EMPLOYED)
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def folder(user):
    from db import db
    from models.folder import Folder

    folder = Folder(title='동아리', user_id=user.id)
    db.session.add(folder)
    db.session.commit()
    return folder


@pytest.fixture
def analysis(user, folder):
    """A filed memo record with an (ability-less) analysis"""
    from db import db
    from models.analysis import Analysis
    from models.record import Record, RecordType

    record = Record(title='프로젝트 회의', content=MEMO_CONTENT, type=RecordType.MEMO,
                    user_id=user.id, folder_id=folder.id)
    db.session.add(record)
    db.session.flush()
    analysis = Analysis(content=record.content, comment='좋은 경험입니다.', record_id=record.id, abilities=[])
    db.session.add(analysis)
    db.session.commit()
    return analysis


@pytest.fixture
def auth_headers(user):
    import auth

    return {'Authorization': f'Bearer {auth.generate_access_token(user.id)}'}


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing"""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.error = MagicMock()
    logger.warning = MagicMock()
    logger.debug = MagicMock()
    return logger
