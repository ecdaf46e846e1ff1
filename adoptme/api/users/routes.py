# adoptme/api/users/routes.py
from flask import Blueprint, request, jsonify, current_app

from adoptme.api.users.schemas import UserPublicResponseSchema, UserUpdateSchema

users_bp = Blueprint('users_bp', __name__)

@users_bp.route('', methods=['GET'])
def get_all_users():
    users = current_app.services['users'].list_users()
    return jsonify({"status": "success", "payload": UserPublicResponseSchema(many=True).dump(users)}), 200

@users_bp.route('/<string:uid>', methods=['GET'])
def get_user(uid: str):
    """특정 사용자의 프로필 정보를 조회합니다."""
    user = current_app.services['users'].get_user(uid)
    return jsonify({"status": "success", "payload": UserPublicResponseSchema().dump(user)}), 200

@users_bp.route('/<string:uid>', methods=['PUT'])
def update_user(uid: str):
    update_data = UserUpdateSchema().load(request.get_json(silent=True) or {})
    user = current_app.services['users'].update_user(uid, update_data)
    return jsonify({"status": "success", "message": "User updated", "payload": UserPublicResponseSchema().dump(user)}), 200

@users_bp.route('/<string:uid>', methods=['DELETE'])
def delete_user(uid: str):
    current_app.services['users'].delete_user(uid)
    return jsonify({"status": "success", "message": "User deleted"}), 200
