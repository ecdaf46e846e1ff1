# adoptme/api/adoptions/schemas.py
from marshmallow import Schema, fields

class AdoptionRequestSchema(Schema):
    """POST /api/adoptions 요청 스키마. adoptionDate를 생략하면 오늘 날짜가 사용됩니다."""
    uid = fields.Str(required=True, error_messages={"required": "uid(사용자 ID)는 필수입니다."})
    pid = fields.Str(required=True, error_messages={"required": "pid(반려동물 ID)는 필수입니다."})
    adoption_date = fields.Date(data_key="adoptionDate", format="%Y-%m-%d", required=False)

class AdoptionResponseSchema(Schema):
    adoption_id = fields.Str(data_key="_id", dump_only=True)
    uid = fields.Str()
    pid = fields.Str()
    adoption_date = fields.Date(data_key="adoptionDate", allow_none=True)
