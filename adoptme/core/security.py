import jwt
import bcrypt
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Any, Dict
from flask import request, g, current_app

from adoptme.core.exceptions import AuthenticationError

ALGORITHM = "HS256"

def hash_password(password: str, rounds: int = 12) -> str:
    hashed = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=rounds))
    return hashed.decode('utf-8')

def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
    except ValueError:
        # 저장된 값이 bcrypt 해시 형식이 아닌 경우
        return False

def create_session_token(data: dict, secret_key: str, ttl: timedelta) -> str:
    to_encode = data.copy()
    issued_at = datetime.now(timezone.utc)
    to_encode.update({"iat": issued_at, "exp": issued_at + ttl, "type": "session"})
    return jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)

def decode_session_token(token: str, secret_key: str) -> Dict[str, Any]:
    """서명과 만료를 검증하고 클레임을 반환합니다. 실패 시 AuthenticationError."""
    if not token:
        raise AuthenticationError("Session cookie is missing")
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Session has expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid session")
    if payload.get("type") != "session" or not payload.get("sub"):
        raise AuthenticationError("Invalid session")
    return payload

def session_required(f):
    """세션 쿠키를 검증하고 클레임을 g.session에 저장하는 데코레이터."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = request.cookies.get(current_app.config['SESSION_COOKIE_NAME'])
        g.session = decode_session_token(token, current_app.config['SESSION_SECRET_KEY'])
        return f(*args, **kwargs)

    return decorated_function
