# adoptme/api/mocks/routes.py
from flask import Blueprint, request, jsonify, current_app

from adoptme.api.mocks.schemas import MockingQuerySchema, GenerateDataSchema
from adoptme.api.pets.schemas import PetResponseSchema
from adoptme.api.users.schemas import UserPublicResponseSchema

mocks_bp = Blueprint('mocks_bp', __name__)

@mocks_bp.route('/mockingpets', methods=['GET'])
def mocking_pets():
    """저장하지 않는 목업 반려동물 목록 (기본 100개)."""
    query = MockingQuerySchema().load(request.args.to_dict())
    pets = current_app.services['mocks'].generate_pets(query.get('count', 100), query.get('seed'))
    return jsonify({"status": "success", "payload": PetResponseSchema(many=True).dump(pets)}), 200

@mocks_bp.route('/mockingusers', methods=['GET'])
def mocking_users():
    """저장하지 않는 목업 사용자 목록 (기본 50명)."""
    query = MockingQuerySchema().load(request.args.to_dict())
    users = current_app.services['mocks'].generate_users(query.get('count', 50), query.get('seed'))
    return jsonify({"status": "success", "payload": UserPublicResponseSchema(many=True).dump(users)}), 200

@mocks_bp.route('/generateData', methods=['POST'])
def generate_data():
    data = GenerateDataSchema().load(request.get_json(silent=True) or {})
    inserted = current_app.services['mocks'].generate_data(data['users'], data['pets'], data.get('seed'))
    return jsonify({"status": "success", "message": "Mock data generated", "payload": inserted}), 200
