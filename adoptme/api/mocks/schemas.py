# adoptme/api/mocks/schemas.py
from marshmallow import Schema, fields, validate

MAX_MOCK_COUNT = 1000

class MockingQuerySchema(Schema):
    """GET /api/mocks/mockingpets, /mockingusers 쿼리 파라미터 스키마."""
    count = fields.Int(validate=validate.Range(min=0, max=MAX_MOCK_COUNT))
    seed = fields.Int(allow_none=True)

class GenerateDataSchema(Schema):
    """POST /api/mocks/generateData 요청 스키마."""
    users = fields.Int(required=True, validate=validate.Range(min=0, max=MAX_MOCK_COUNT))
    pets = fields.Int(required=True, validate=validate.Range(min=0, max=MAX_MOCK_COUNT))
    seed = fields.Int(allow_none=True)
