# adoptme/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 서버 포트. run.py에서 app.run(port=...)에 전달됩니다.
    PORT = int(os.getenv('PORT', 8080))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # MongoDB 연결 문자열과 사용할 데이터베이스 이름
    MONGO_URL = os.getenv('MONGO_URL', 'mongodb://localhost:27017')
    MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'adoptme')

    # 세션 쿠키(JWT)를 서명하는 데 사용되는 키. 토큰 위변조를 방지합니다.
    SESSION_SECRET_KEY = os.getenv('SESSION_SECRET_KEY')
    SESSION_COOKIE_NAME = os.getenv('SESSION_COOKIE_NAME', 'coderCookie')
    SESSION_TTL_MINUTES = int(os.getenv('SESSION_TTL_MINUTES', 60))
    SESSION_COOKIE_SECURE = False

    # bcrypt 해시 비용(work factor)
    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', 12))

    # /apidocs 문서 메타데이터
    API_TITLE = "Documentación de la App Adoptame"
    API_DESCRIPTION = "App dedicada a encontrar familias para los perritos de la calle"
    API_VERSION = "1.0.0"

class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True
    SESSION_SECRET_KEY = os.getenv('SESSION_SECRET_KEY', 'dev-secret-change-me')

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    MONGO_DB_NAME = os.getenv('TEST_MONGO_DB_NAME', 'adoptme_test')
    SESSION_SECRET_KEY = 'test-secret'
    # 테스트 속도를 위해 bcrypt 최소 비용을 사용합니다.
    BCRYPT_ROUNDS = 4

class ProductionConfig(Config):
    """운영 환경 설정. SESSION_SECRET_KEY는 반드시 환경 변수로 주입해야 합니다."""
    DEBUG = False
    SESSION_COOKIE_SECURE = True

# 문자열 키와 해당 환경의 설정 클래스를 매핑합니다.
# create_app에서 FLASK_ENV 값에 따라 적절한 설정을 선택하는 데 사용됩니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
