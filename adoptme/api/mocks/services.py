# adoptme/api/mocks/services.py
"""
테스트 픽스처용 목업 데이터 생성기.

같은 seed에는 항상 같은 데이터가 생성됩니다.
"""
import logging
import random
import uuid
from datetime import date, timedelta
from typing import List, Optional, Dict

from adoptme.api.pets.services import PetService
from adoptme.api.users.services import UserService
from adoptme.core.security import hash_password
from adoptme.models.pet import Pet
from adoptme.models.user import User, UserRole

MOCK_PASSWORD = "coder123"

PET_NAMES = [
    "Rambo", "Roger", "Bambi", "Luna", "Toby", "Nala", "Simba", "Coco", "Milo", "Kira",
    "Rocky", "Lola", "Max", "Canela", "Firulais", "Pelusa", "Manchas", "Chispa", "Olivia", "Bruno",
]
SPECIES = ["Perro", "Gato", "Conejo", "Hamster", "Loro", "Tortuga", "Pichicho"]
FIRST_NAMES = [
    "Edu", "Yayo", "Lucia", "Martina", "Santiago", "Valentina", "Mateo", "Camila", "Joaquin", "Sofia",
    "Tomas", "Julieta", "Benjamin", "Agustina", "Lautaro", "Florencia",
]
LAST_NAMES = [
    "Galli", "Caceres", "Gonzalez", "Rodriguez", "Fernandez", "Lopez", "Martinez", "Garcia",
    "Perez", "Sanchez", "Romero", "Diaz", "Alvarez", "Torres",
]


class MockingService:
    def __init__(self, pet_service: PetService, user_service: UserService, bcrypt_rounds: int = 12):
        self.pet_service = pet_service
        self.user_service = user_service
        self.bcrypt_rounds = bcrypt_rounds

    @staticmethod
    def _rng(seed: Optional[int]) -> random.Random:
        return random.Random(seed)

    @staticmethod
    def _uuid(rng: random.Random) -> str:
        return str(uuid.UUID(int=rng.getrandbits(128), version=4))

    def generate_pets(self, count: int, seed: Optional[int] = None) -> List[Pet]:
        rng = self._rng(seed)
        pets = []
        for _ in range(count):
            birth_date = date(2010, 1, 1) + timedelta(days=rng.randrange(0, 15 * 365))
            pets.append(Pet(
                pet_id=self._uuid(rng),
                name=rng.choice(PET_NAMES),
                specie=rng.choice(SPECIES),
                birth_date=birth_date,
                adopted=False,
                image=f"https://picsum.photos/seed/{rng.randrange(10**6)}/300/300",
            ))
        return pets

    def generate_users(self, count: int, seed: Optional[int] = None) -> List[User]:
        rng = self._rng(seed)
        # 모든 목업 사용자가 같은 비밀번호를 쓰므로 해시는 한 번만 계산합니다.
        hashed = hash_password(MOCK_PASSWORD, rounds=self.bcrypt_rounds) if count else None
        users = []
        for _ in range(count):
            first_name = rng.choice(FIRST_NAMES)
            last_name = rng.choice(LAST_NAMES)
            users.append(User(
                user_id=self._uuid(rng),
                first_name=first_name,
                last_name=last_name,
                email=f"{first_name}.{last_name}.{rng.randrange(10**8):08d}@adoptme.mock".lower(),
                password=hashed,
                role=rng.choice([UserRole.USER.value, UserRole.ADMIN.value]),
                pets=[],
            ))
        return users

    def generate_data(self, users: int, pets: int, seed: Optional[int] = None) -> Dict[str, int]:
        """요청한 수만큼 목업 사용자/반려동물을 생성해 DB에 저장합니다."""
        inserted_users = self.user_service.insert_users(self.generate_users(users, seed))
        inserted_pets = self.pet_service.create_pets(self.generate_pets(pets, seed))
        logging.info(f"Mock data generated: {inserted_users} users, {inserted_pets} pets (seed={seed})")
        return {"users": inserted_users, "pets": inserted_pets}
