# adoptme/models/user.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any

class UserRole(Enum):
    USER = "user"
    ADMIN = "admin"

@dataclass
class User:
    """
    MongoDB 'users' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    password에는 bcrypt 해시만 저장되며 응답 스키마에서는 항상 제외됩니다.
    """
    user_id: str
    first_name: str
    last_name: str
    email: str
    password: str
    role: str = UserRole.USER.value
    pets: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            user_id=data['_id'],
            first_name=data.get('first_name'),
            last_name=data.get('last_name'),
            email=data.get('email'),
            password=data.get('password'),
            role=data.get('role') or UserRole.USER.value,
            pets=list(data.get('pets') or []),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            '_id': self.user_id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
            'password': self.password,
            'role': self.role,
            'pets': list(self.pets),
        }
