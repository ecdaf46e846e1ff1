# adoptme/api/users/services.py
import logging
import uuid
from typing import Dict, Any, List, Optional
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from adoptme.core.database import MongoDatabase
from adoptme.core.exceptions import NotFoundError, ConflictError
from adoptme.core.security import hash_password
from adoptme.models.user import User

class UserService:
    """
    사용자 관련 비즈니스 로직을 담당하는 서비스 클래스.
    - 회원 생성(비밀번호 해시), 조회, 수정, 삭제, 입양 반려동물 연결을 포함합니다.
    """
    def __init__(self, database: MongoDatabase, bcrypt_rounds: int = 12):
        self.users_ref = database.collection('users')
        self.bcrypt_rounds = bcrypt_rounds

    def list_users(self) -> List[User]:
        return [User.from_dict(doc) for doc in self.users_ref.find()]

    def find_user(self, user_id: str) -> Optional[User]:
        doc = self.users_ref.find_one({'_id': user_id})
        return User.from_dict(doc) if doc else None

    def get_user(self, user_id: str) -> User:
        user = self.find_user(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        doc = self.users_ref.find_one({'email': email.lower()})
        return User.from_dict(doc) if doc else None

    def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        비밀번호를 해시하여 새 사용자를 저장합니다.
        이메일 중복은 사전 조회가 아니라 유니크 인덱스로 판정합니다.
        """
        new_user = User(
            user_id=str(uuid.uuid4()),
            first_name=user_data['first_name'],
            last_name=user_data['last_name'],
            email=user_data['email'].lower(),
            password=hash_password(user_data['password'], rounds=self.bcrypt_rounds),
        )
        try:
            self.users_ref.insert_one(new_user.to_document())
        except DuplicateKeyError:
            logging.info(f"Registration rejected, email already exists: {new_user.email}")
            raise ConflictError("User already exists")
        logging.info(f"User created: {new_user.user_id}")
        return new_user

    def insert_users(self, users: List[User]) -> int:
        """목업 사용자 일괄 저장. 이미 존재하는 이메일은 건너뜁니다."""
        inserted = 0
        for user in users:
            try:
                self.users_ref.insert_one(user.to_document())
                inserted += 1
            except DuplicateKeyError:
                logging.debug(f"Skipping mock user with existing email: {user.email}")
        return inserted

    def update_user(self, user_id: str, update_data: Dict[str, Any]) -> User:
        updated = self.users_ref.find_one_and_update(
            {'_id': user_id},
            {'$set': update_data},
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            raise NotFoundError("User", user_id)
        logging.info(f"User {user_id} updated with fields: {list(update_data.keys())}")
        return User.from_dict(updated)

    def delete_user(self, user_id: str) -> None:
        # 입양 기록이 참조하는 사용자는 삭제하지 않습니다.
        result = self.users_ref.delete_one({'_id': user_id, 'pets': {'$size': 0}})
        if result.deleted_count:
            logging.info(f"User deleted: {user_id}")
            return
        if self.users_ref.find_one({'_id': user_id}, {'_id': 1}):
            raise ConflictError("Users with adoptions cannot be deleted")
        raise NotFoundError("User", user_id)

    def add_pet(self, user_id: str, pet_id: str) -> None:
        self.users_ref.update_one({'_id': user_id}, {'$addToSet': {'pets': pet_id}})
