# adoptme/models/adoption.py
from dataclasses import dataclass
from datetime import date
from typing import Optional, Dict, Any

from adoptme.utils.datetime_utils import DateTimeUtils

@dataclass
class Adoption:
    """
    MongoDB 'adoptions' 컬렉션 문서 구조.
    사용자(uid)와 반려동물(pid)의 짝을 기록하며 생성 이후 변경되지 않습니다.
    """
    adoption_id: str
    uid: str
    pid: str
    adoption_date: Optional[date] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Adoption":
        return cls(
            adoption_id=data['_id'],
            uid=data['uid'],
            pid=data['pid'],
            adoption_date=DateTimeUtils.to_date(data.get('adoptionDate')),
        )

    def to_document(self) -> Dict[str, Any]:
        return DateTimeUtils.for_mongo({
            '_id': self.adoption_id,
            'uid': self.uid,
            'pid': self.pid,
            'adoptionDate': self.adoption_date,
        })
