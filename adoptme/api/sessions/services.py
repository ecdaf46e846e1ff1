# adoptme/api/sessions/services.py
import logging
from datetime import timedelta
from typing import Dict, Any

from adoptme.api.users.services import UserService
from adoptme.core.exceptions import AuthenticationError
from adoptme.core.security import verify_password, create_session_token
from adoptme.models.user import User

class SessionService:
    """회원가입, 로그인(세션 토큰 발급), 현재 사용자 확인을 담당합니다."""
    def __init__(self, user_service: UserService, secret_key: str, ttl_minutes: int = 60):
        self.user_service = user_service
        self.secret_key = secret_key
        self.ttl = timedelta(minutes=ttl_minutes)

    def register(self, user_data: Dict[str, Any]) -> User:
        return self.user_service.create_user(user_data)

    def login(self, email: str, password: str) -> str:
        """자격 증명을 확인하고 서명된 세션 토큰을 반환합니다."""
        user = self.user_service.find_by_email(email)
        # 존재하지 않는 이메일과 비밀번호 불일치를 구분하지 않습니다.
        if not user or not verify_password(password, user.password):
            logging.info(f"Login failed for {email}")
            raise AuthenticationError("Incorrect credentials")

        token = create_session_token({
            "sub": user.user_id,
            "email": user.email,
            "role": user.role,
            "name": f"{user.first_name} {user.last_name}",
        }, self.secret_key, self.ttl)
        logging.info(f"User logged in: {user.user_id}")
        return token

    def current_user(self, claims: Dict[str, Any]) -> User:
        """검증된 세션 클레임으로 DB에서 사용자를 다시 조회합니다."""
        user = self.user_service.find_user(claims['sub'])
        if not user:
            raise AuthenticationError("Session user no longer exists")
        return user

    @property
    def max_age(self) -> int:
        return int(self.ttl.total_seconds())
