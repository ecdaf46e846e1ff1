# adoptme/core/exceptions.py
"""
애플리케이션 도메인 예외 계층.

서비스 계층은 HTTP를 모르고 아래 예외만 발생시키며,
create_app에서 등록한 전역 에러 핸들러가 상태 코드와 에러 응답 형식으로 변환합니다.

    AdoptmeError (base, 500)
    ├── NotFoundError        → 404
    ├── ConflictError        → 409
    ├── AlreadyAdoptedError  → 400
    └── AuthenticationError  → 401
"""

from typing import Any, Dict, Optional


class AdoptmeError(Exception):
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = "An unexpected error occurred", details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(AdoptmeError):
    """요청한 리소스(사용자, 반려동물, 입양 기록)가 존재하지 않을 때."""
    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} '{resource_id}' not found"
        super().__init__(message)
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(AdoptmeError):
    """유니크 제약 위반 등 현재 상태와 충돌하는 요청 (예: 중복 이메일)."""
    status_code = 409
    error_code = "CONFLICT"


class AlreadyAdoptedError(AdoptmeError):
    status_code = 400
    error_code = "PET_ALREADY_ADOPTED"

    def __init__(self, pet_id: str):
        super().__init__("Pet is already adopted")
        self.pet_id = pet_id


class AuthenticationError(AdoptmeError):
    """자격 증명 불일치, 세션 쿠키 누락/위조/만료."""
    status_code = 401
    error_code = "UNAUTHORIZED"
