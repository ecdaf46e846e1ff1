# adoptme/api/pets/routes.py
from flask import Blueprint, request, jsonify, current_app

from .schemas import PetCreateSchema, PetUpdateSchema, PetResponseSchema

pets_bp = Blueprint('pets_bp', __name__)

@pets_bp.route('', methods=['GET'])
def get_all_pets():
    """등록된 전체 반려동물 목록을 조회합니다."""
    pets = current_app.services['pets'].list_pets()
    return jsonify({"status": "success", "payload": PetResponseSchema(many=True).dump(pets)}), 200

@pets_bp.route('', methods=['POST'])
def create_pet():
    """반려동물 등록 API. adopted는 항상 false로 시작합니다."""
    validated_data = PetCreateSchema().load(request.get_json(silent=True) or {})
    new_pet = current_app.services['pets'].create_pet(validated_data)
    return jsonify({"status": "success", "payload": PetResponseSchema().dump(new_pet)}), 200

@pets_bp.route('/<string:pid>', methods=['GET'])
def get_pet(pid: str):
    pet = current_app.services['pets'].get_pet(pid)
    return jsonify({"status": "success", "payload": PetResponseSchema().dump(pet)}), 200

@pets_bp.route('/<string:pid>', methods=['PUT'])
def update_pet(pid: str):
    """반려동물 정보를 수정합니다 (부분 업데이트)."""
    update_data = PetUpdateSchema().load(request.get_json(silent=True) or {})
    pet = current_app.services['pets'].update_pet(pid, update_data)
    return jsonify({"status": "success", "message": "Pet updated", "payload": PetResponseSchema().dump(pet)}), 200

@pets_bp.route('/<string:pid>', methods=['DELETE'])
def delete_pet(pid: str):
    current_app.services['pets'].delete_pet(pid)
    return jsonify({"status": "success", "message": "Pet deleted"}), 200
