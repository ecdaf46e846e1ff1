# adoptme/api/adoptions/services.py
import logging
import uuid
from datetime import date
from typing import List, Optional
from pymongo.errors import PyMongoError

from adoptme.api.pets.services import PetService
from adoptme.api.users.services import UserService
from adoptme.core.database import MongoDatabase
from adoptme.core.exceptions import NotFoundError, AlreadyAdoptedError
from adoptme.models.adoption import Adoption
from adoptme.utils.datetime_utils import DateTimeUtils

class AdoptionService:
    """사용자와 반려동물을 연결하는 입양 처리 서비스."""
    def __init__(self, database: MongoDatabase, pet_service: PetService, user_service: UserService):
        self.adoptions_ref = database.collection('adoptions')
        self.pet_service = pet_service
        self.user_service = user_service

    def list_adoptions(self) -> List[Adoption]:
        return [Adoption.from_dict(doc) for doc in self.adoptions_ref.find()]

    def get_adoption(self, adoption_id: str) -> Adoption:
        doc = self.adoptions_ref.find_one({'_id': adoption_id})
        if not doc:
            raise NotFoundError("Adoption", adoption_id)
        return Adoption.from_dict(doc)

    def adopt(self, user_id: str, pet_id: str, adoption_date: Optional[date] = None) -> Adoption:
        """
        입양 처리 순서:
        1. 사용자/반려동물 존재 확인 (404)
        2. adopted=false 조건부 원자적 업데이트로 반려동물 선점 (실패 시 400)
        3. 입양 기록 저장, 실패하면 2단계를 되돌림
        4. 사용자의 pets 목록에 반려동물 추가
        """
        if not self.user_service.find_user(user_id):
            raise NotFoundError("User", user_id)
        pet = self.pet_service.find_pet(pet_id)
        if not pet:
            raise NotFoundError("Pet", pet_id)
        if pet.adopted:
            raise AlreadyAdoptedError(pet_id)

        # 동시에 같은 반려동물을 입양하려는 요청 중 하나만 통과합니다.
        if not self.pet_service.mark_adopted(pet_id, user_id):
            # 조회 이후 삭제된 경우는 404로 구분합니다.
            if not self.pet_service.find_pet(pet_id):
                raise NotFoundError("Pet", pet_id)
            raise AlreadyAdoptedError(pet_id)

        adoption = Adoption(
            adoption_id=str(uuid.uuid4()),
            uid=user_id,
            pid=pet_id,
            adoption_date=adoption_date or DateTimeUtils.today(),
        )
        try:
            self.adoptions_ref.insert_one(adoption.to_document())
        except PyMongoError as e:
            logging.error(f"Adoption insert failed for pet {pet_id}: {e}", exc_info=True)
            self.pet_service.revert_adoption(pet_id)
            raise

        self.user_service.add_pet(user_id, pet_id)
        logging.info(f"Pet {pet_id} adopted by user {user_id} (adoption {adoption.adoption_id})")
        return adoption
