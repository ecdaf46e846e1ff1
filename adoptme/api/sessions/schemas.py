#adoptme/api/sessions/schemas.py
from marshmallow import Schema, fields, validate, validates, ValidationError

# bcrypt는 비밀번호의 앞 72바이트까지만 사용합니다.
MAX_PASSWORD_BYTES = 72

class RegisterSchema(Schema):
    """회원가입 요청의 유효성을 검사하는 스키마"""
    first_name = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    last_name = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    email = fields.Email(required=True)
    password = fields.Str(
        required=True,
        load_only=True,
        validate=validate.Length(min=1),
        error_messages={"required": "password는 필수 항목입니다."}
    )

    @validates('password')
    def validate_password_bytes(self, value, **kwargs):
        # 글자 수가 아니라 UTF-8 바이트 수 기준
        if len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"password는 UTF-8 기준 {MAX_PASSWORD_BYTES}바이트를 넘을 수 없습니다.")

class LoginSchema(Schema):
    """로그인 요청의 유효성을 검사하는 스키마"""
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True)
