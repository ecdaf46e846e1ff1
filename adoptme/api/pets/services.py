# adoptme/api/pets/services.py
import logging
import uuid
from typing import Dict, Any, List, Optional
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from adoptme.core.database import MongoDatabase
from adoptme.core.exceptions import NotFoundError, ConflictError
from adoptme.models.pet import Pet
from adoptme.utils.datetime_utils import DateTimeUtils

class PetService:
    """반려동물 등록/조회/수정/삭제와 입양 상태 전환을 담당하는 서비스."""
    def __init__(self, database: MongoDatabase):
        self.pets_ref = database.collection('pets')
        logging.info("PetService initialized.")

    def list_pets(self) -> List[Pet]:
        return [Pet.from_dict(doc) for doc in self.pets_ref.find()]

    def find_pet(self, pet_id: str) -> Optional[Pet]:
        doc = self.pets_ref.find_one({'_id': pet_id})
        return Pet.from_dict(doc) if doc else None

    def get_pet(self, pet_id: str) -> Pet:
        pet = self.find_pet(pet_id)
        if not pet:
            raise NotFoundError("Pet", pet_id)
        return pet

    def create_pet(self, pet_data: Dict[str, Any]) -> Pet:
        new_pet = Pet(
            pet_id=str(uuid.uuid4()),
            name=pet_data['name'],
            specie=pet_data['specie'],
            birth_date=pet_data.get('birth_date'),
            image=pet_data.get('image'),
        )
        self.pets_ref.insert_one(new_pet.to_document())
        logging.info(f"Pet created: {new_pet.pet_id} ({new_pet.name})")
        return new_pet

    def create_pets(self, pets: List[Pet]) -> int:
        """목업 데이터 일괄 등록용. 이미 존재하는 _id는 건너뜁니다."""
        inserted = 0
        for pet in pets:
            try:
                self.pets_ref.insert_one(pet.to_document())
                inserted += 1
            except DuplicateKeyError:
                logging.debug(f"Skipping mock pet with existing id: {pet.pet_id}")
        return inserted

    def update_pet(self, pet_id: str, update_data: Dict[str, Any]) -> Pet:
        """반려동물 프로필을 부분 업데이트합니다. adopted/owner는 여기서 바꿀 수 없습니다."""
        fields_map = {'name': 'name', 'specie': 'specie', 'birth_date': 'birthDate', 'image': 'image'}
        changes = {fields_map[k]: v for k, v in update_data.items() if k in fields_map}
        updated = self.pets_ref.find_one_and_update(
            {'_id': pet_id},
            {'$set': DateTimeUtils.for_mongo(changes)},
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            raise NotFoundError("Pet", pet_id)
        logging.info(f"Pet profile updated for {pet_id} with fields: {list(changes.keys())}")
        return Pet.from_dict(updated)

    def delete_pet(self, pet_id: str) -> None:
        # 입양된 반려동물은 입양 기록과의 정합성을 위해 삭제하지 않습니다.
        result = self.pets_ref.delete_one({'_id': pet_id, 'adopted': False})
        if result.deleted_count:
            logging.info(f"Pet deleted: {pet_id}")
            return
        if self.pets_ref.find_one({'_id': pet_id}, {'_id': 1}):
            raise ConflictError("Adopted pets cannot be deleted")
        raise NotFoundError("Pet", pet_id)

    def mark_adopted(self, pet_id: str, owner_id: str) -> Optional[Pet]:
        """
        adopted=false인 경우에만 원자적으로 true로 바꿉니다.
        이미 입양되었거나 존재하지 않으면 None을 반환합니다.
        """
        updated = self.pets_ref.find_one_and_update(
            {'_id': pet_id, 'adopted': False},
            {'$set': {'adopted': True, 'owner': owner_id}},
            return_document=ReturnDocument.AFTER,
        )
        return Pet.from_dict(updated) if updated else None

    def revert_adoption(self, pet_id: str) -> None:
        """입양 기록 생성 실패 시 mark_adopted를 되돌립니다."""
        self.pets_ref.update_one({'_id': pet_id}, {'$set': {'adopted': False, 'owner': None}})
        logging.warning(f"Adoption flag reverted for pet {pet_id}")
