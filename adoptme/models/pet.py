# adoptme/models/pet.py
from dataclasses import dataclass
from datetime import date
from typing import Optional, Dict, Any
import logging

from adoptme.utils.datetime_utils import DateTimeUtils

@dataclass
class Pet:
    """
    MongoDB 'pets' 컬렉션 문서 구조.
    adopted는 입양 완료 시 false → true로 한 번만 바뀝니다.
    """
    pet_id: str
    name: str
    specie: str
    birth_date: Optional[date] = None
    adopted: bool = False
    owner: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pet":
        """
        MongoDB에서 받은 문서로부터 Pet 인스턴스를 생성합니다.
        저장 시 datetime으로 바뀐 birthDate를 date로 되돌립니다.
        """
        try:
            birth_date = DateTimeUtils.to_date(data.get('birthDate'))
        except ValueError:
            logging.warning(f"Invalid birthDate '{data.get('birthDate')}' for pet {data.get('_id')}")
            birth_date = None

        return cls(
            pet_id=data['_id'],
            name=data.get('name'),
            specie=data.get('specie'),
            birth_date=birth_date,
            adopted=bool(data.get('adopted', False)),
            owner=data.get('owner'),
            image=data.get('image'),
        )

    def to_document(self) -> Dict[str, Any]:
        """MongoDB 저장용 문서로 변환합니다."""
        return DateTimeUtils.for_mongo({
            '_id': self.pet_id,
            'name': self.name,
            'specie': self.specie,
            'birthDate': self.birth_date,
            'adopted': self.adopted,
            'owner': self.owner,
            'image': self.image,
        })
