# adoptme/api/users/schemas.py
from marshmallow import Schema, fields, validate, validates_schema, ValidationError

from adoptme.models.user import UserRole

class UserPublicResponseSchema(Schema):
    """
    사용자 정보를 응답할 때 사용하는 스키마.
    password 해시는 절대 포함하지 않습니다.
    """
    user_id = fields.Str(data_key="_id", dump_only=True)
    first_name = fields.Str()
    last_name = fields.Str()
    email = fields.Email()
    role = fields.Str()
    pets = fields.List(fields.Str())

class UserUpdateSchema(Schema):
    """PUT /api/users/<uid> 부분 업데이트 스키마. email과 password는 변경할 수 없습니다."""
    first_name = fields.Str(validate=validate.Length(min=1, max=50))
    last_name = fields.Str(validate=validate.Length(min=1, max=50))
    role = fields.Str(validate=validate.OneOf([e.value for e in UserRole]))

    @validates_schema
    def validate_not_empty(self, data, **kwargs):
        if not data:
            raise ValidationError("수정할 필드가 하나 이상 필요합니다.")
