# adoptme/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정 및 공용 인프라
from adoptme.core.config import config_by_name
from adoptme.core.database import MongoDatabase
from adoptme.core.exceptions import AdoptmeError

# - API 블루프린트
from adoptme.api.users.routes import users_bp
from adoptme.api.pets.routes import pets_bp
from adoptme.api.adoptions.routes import adoptions_bp
from adoptme.api.sessions.routes import sessions_bp
from adoptme.api.mocks.routes import mocks_bp
from adoptme.docs.routes import docs_bp

# - 서비스 모듈
from adoptme.api.users.services import UserService
from adoptme.api.pets.services import PetService
from adoptme.api.adoptions.services import AdoptionService
from adoptme.api.sessions.services import SessionService
from adoptme.api.mocks.services import MockingService
from adoptme.docs.openapi import build_openapi_spec

def create_app(config_name=None, mongo_client=None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' | 'testing' | 'production' (생략 시 FLASK_ENV)
    :param mongo_client: 미리 만든 MongoClient (테스트에서는 mongomock.MongoClient)
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    if config_name not in config_by_name:
        raise ValueError(f"알 수 없는 설정 이름입니다: {config_name}")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    if not app.config.get('SESSION_SECRET_KEY'):
        raise ValueError("필수 환경 변수가 설정되지 않았습니다: SESSION_SECRET_KEY")

    # =====================================================================================
    # 4. 데이터베이스 연결 (프로세스 전역, 종료 시 close)
    # =====================================================================================
    database = MongoDatabase()
    database.init_app(app, client=mongo_client)

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}
    app.services['db'] = database
    app.services['users'] = UserService(database, bcrypt_rounds=app.config['BCRYPT_ROUNDS'])
    app.services['pets'] = PetService(database)
    app.services['adoptions'] = AdoptionService(
        database,
        pet_service=app.services['pets'],
        user_service=app.services['users']
    )
    app.services['sessions'] = SessionService(
        user_service=app.services['users'],
        secret_key=app.config['SESSION_SECRET_KEY'],
        ttl_minutes=app.config['SESSION_TTL_MINUTES']
    )
    app.services['mocks'] = MockingService(
        pet_service=app.services['pets'],
        user_service=app.services['users'],
        bcrypt_rounds=app.config['BCRYPT_ROUNDS']
    )

    # =====================================================================================
    # 6. 블루프린트 등록 및 API 문서 빌드
    # =====================================================================================
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(pets_bp, url_prefix='/api/pets')
    app.register_blueprint(adoptions_bp, url_prefix='/api/adoptions')
    app.register_blueprint(sessions_bp, url_prefix='/api/sessions')
    app.register_blueprint(mocks_bp, url_prefix='/api/mocks')

    app.openapi_spec = build_openapi_spec(
        title=app.config['API_TITLE'],
        description=app.config['API_DESCRIPTION'],
        version=app.config['API_VERSION']
    )
    app.register_blueprint(docs_bp, url_prefix='/apidocs')

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"status": "error", "error_code": "VALIDATION_ERROR", "error": "Incomplete or invalid values", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(AdoptmeError)
    def handle_domain_error(err):
        response = {"status": "error", "error_code": err.error_code, "error": err.message}
        if err.details:
            response["details"] = err.details
        return jsonify(response), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        # werkzeug 응답을 그대로 쓰고 본문만 JSON으로 바꿉니다. (405의 Allow 헤더 유지)
        response = err.get_response()
        response.data = app.json.dumps({"status": "error", "error_code": err.name.upper().replace(' ', '_'), "error": err.description})
        response.content_type = "application/json"
        return response

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"status": "error", "error_code": "INTERNAL_SERVER_ERROR", "error": "Unexpected server error"}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(
            level=app.config['LOG_LEVEL'],
            format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        )

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
