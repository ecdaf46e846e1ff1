# adoptme/api/adoptions/routes.py
from flask import Blueprint, request, jsonify, current_app

from .schemas import AdoptionRequestSchema, AdoptionResponseSchema

adoptions_bp = Blueprint('adoptions_bp', __name__)

def _adopted_response(adoption):
    return jsonify({
        "status": "success",
        "message": "Pet adopted",
        "payload": AdoptionResponseSchema().dump(adoption)
    }), 200

@adoptions_bp.route('', methods=['GET'])
def get_all_adoptions():
    adoptions = current_app.services['adoptions'].list_adoptions()
    return jsonify({"status": "success", "payload": AdoptionResponseSchema(many=True).dump(adoptions)}), 200

@adoptions_bp.route('/<string:aid>', methods=['GET'])
def get_adoption(aid: str):
    adoption = current_app.services['adoptions'].get_adoption(aid)
    return jsonify({"status": "success", "payload": AdoptionResponseSchema().dump(adoption)}), 200

@adoptions_bp.route('', methods=['POST'])
def create_adoption():
    """본문의 uid/pid로 입양을 등록합니다."""
    data = AdoptionRequestSchema().load(request.get_json(silent=True) or {})
    adoption = current_app.services['adoptions'].adopt(data['uid'], data['pid'], data.get('adoption_date'))
    return _adopted_response(adoption)

@adoptions_bp.route('/<string:uid>/<string:pid>', methods=['POST'])
def create_adoption_by_path(uid: str, pid: str):
    """경로 파라미터 형식(/api/adoptions/<uid>/<pid>)의 입양 등록."""
    adoption = current_app.services['adoptions'].adopt(uid, pid)
    return _adopted_response(adoption)
