import os

APP_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_DIR = os.path.join(APP_DIR, 'config')
DB_FILE = os.path.join(CONFIG_DIR, 'corecord.db')
CONFIG_FILE = os.path.join(CONFIG_DIR, 'settings.yaml')
MIGRATIONS_DIR = os.path.join(APP_DIR, 'migrations')

CORECORD_DB = 'sqlite:///' + DB_FILE

BUILD_VERSION = '20261018_1200'

ACCESS_TOKEN_COOKIE = 'accessToken'
REFRESH_TOKEN_COOKIE = 'refreshToken'
REFRESH_TOKEN_KEY_PREFIX = 'refreshToken'

TOKEN_TYPE_ACCESS = 'access'
TOKEN_TYPE_REFRESH = 'refresh'
TOKEN_TYPE_REGISTER = 'register'

# Hangul syllables, latin letters, digits and ASCII whitespace only; compiled with re.ASCII
NICKNAME_PATTERN = r'[a-zA-Z0-9가-힣\s]*'
NICKNAME_MAX_LENGTH = 10

FOLDER_TITLE_MAX_LENGTH = 15
RECORD_TITLE_MAX_LENGTH = 50
RECORD_CONTENT_MIN_LENGTH = 30
RECORD_CONTENT_MAX_LENGTH = 500
ANALYSIS_COMMENT_MAX_LENGTH = 200
ABILITY_CONTENT_MAX_LENGTH = 200

RECORD_PAGE_SIZE = 30
RECENT_RECORD_COUNT = 3

CHAT_AUTHOR_ASSISTANT = 0
CHAT_AUTHOR_USER = 1
CHAT_GREETING = '{nick_name}님, 안녕하세요! 오늘 어떤 경험을 했는지 편하게 이야기해 주세요.'

DEFAULT_SETTINGS = {
    "database": {
        "url": CORECORD_DB,
    },
    "redis": {
        "url": "redis://localhost:6379/0",
    },
    "jwt": {
        "secret": "",
        "algorithm": "HS256",
        "access_token_expiration": 60 * 60 * 2,
        "refresh_token_expiration": 60 * 60 * 24 * 14,
        "register_token_expiration": 60 * 10,
        "tmp_token_expiration": 60 * 60 * 24,
        "tmp_token_enabled": False,
    },
    "cookie": {
        "secure": True,
        "same_site": "None",
        "domain": None,
    },
    "ai": {
        "base_url": "http://localhost:8000",
        "api_key": "",
        "timeout": 30,
    },
}

ENVIRONMENT_OVERRIDES = {
    "DATABASE_URL": ("database", "url"),
    "REDIS_URL": ("redis", "url"),
    "JWT_SECRET": ("jwt", "secret"),
    "AI_BASE_URL": ("ai", "base_url"),
    "AI_API_KEY": ("ai", "api_key"),
}
