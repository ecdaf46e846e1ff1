# adoptme/api/pets/schemas.py
from marshmallow import Schema, fields, validate, validates_schema, ValidationError

class PetCreateSchema(Schema):
    """POST /api/pets 반려동물 등록 요청 스키마."""
    name = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    specie = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    birth_date = fields.Date(required=True, data_key="birthDate", format="%Y-%m-%d")
    image = fields.Str(required=False, allow_none=True)

class PetUpdateSchema(Schema):
    """PUT /api/pets/<pid> 정보 수정을 위한 스키마 (부분 업데이트용)."""
    name = fields.Str(validate=validate.Length(min=1, max=50))
    specie = fields.Str(validate=validate.Length(min=1, max=50))
    birth_date = fields.Date(data_key="birthDate", format="%Y-%m-%d")
    image = fields.Str(allow_none=True)

    @validates_schema
    def validate_not_empty(self, data, **kwargs):
        if not data:
            raise ValidationError("수정할 필드가 하나 이상 필요합니다.")

class PetResponseSchema(Schema):
    """반려동물 응답 스키마."""
    pet_id = fields.Str(data_key="_id", dump_only=True)
    name = fields.Str()
    specie = fields.Str()
    birth_date = fields.Date(data_key="birthDate", allow_none=True)
    adopted = fields.Bool()
    owner = fields.Str(allow_none=True)
    image = fields.Str(allow_none=True)
