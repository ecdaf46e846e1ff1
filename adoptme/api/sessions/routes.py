# adoptme/api/sessions/routes.py
from flask import Blueprint, request, jsonify, current_app, g

from adoptme.api.sessions.schemas import RegisterSchema, LoginSchema
from adoptme.api.users.schemas import UserPublicResponseSchema
from adoptme.core.security import session_required

sessions_bp = Blueprint('sessions_bp', __name__)

@sessions_bp.route('/register', methods=['POST'])
def register():
    """회원가입. 비밀번호는 해시되어 저장되고 응답에는 포함되지 않습니다."""
    validated_data = RegisterSchema().load(request.get_json(silent=True) or {})
    user = current_app.services['sessions'].register(validated_data)
    return jsonify({"status": "success", "payload": UserPublicResponseSchema().dump(user)}), 201

@sessions_bp.route('/login', methods=['POST'])
def login():
    """로그인 성공 시 서명된 세션 토큰을 쿠키로 발급합니다."""
    session_service = current_app.services['sessions']
    credentials = LoginSchema().load(request.get_json(silent=True) or {})
    token = session_service.login(credentials['email'], credentials['password'])

    response = jsonify({"status": "success", "message": "Logged in"})
    response.set_cookie(
        current_app.config['SESSION_COOKIE_NAME'],
        token,
        max_age=session_service.max_age,
        httponly=True,
        secure=current_app.config['SESSION_COOKIE_SECURE'],
        samesite='Lax'
    )
    return response, 200

@sessions_bp.route('/current', methods=['GET'])
@session_required
def current():
    """쿠키의 세션으로 현재 로그인된 사용자 정보를 반환합니다."""
    user = current_app.services['sessions'].current_user(g.session)
    return jsonify({"status": "success", "payload": UserPublicResponseSchema().dump(user)}), 200

@sessions_bp.route('/logout', methods=['POST'])
def logout():
    response = jsonify({"status": "success", "message": "Logged out"})
    response.delete_cookie(current_app.config['SESSION_COOKIE_NAME'])
    return response, 200
