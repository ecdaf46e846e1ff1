# adoptme/api/adoptions/test_adoptions_api.py
"""입양 API 통합 테스트"""
from unittest.mock import patch

import pytest
from pymongo.errors import PyMongoError

from adoptme.core.exceptions import AlreadyAdoptedError, NotFoundError


def test_adopt_pet(client, create_pet, register_user):
    """새 사용자와 미입양 반려동물로 입양이 성공해야 함"""
    pet = create_pet(name="Bambi", specie="Perro", birth_date="2020-06-15")
    user = register_user(email="yayo@hablemossinsaber.com", first_name="Yayo", last_name="Caceres")

    response = client.post("/api/adoptions", json={"uid": user["_id"], "pid": pet["_id"], "adoptionDate": "2024-11-21"})

    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "success"
    assert body["message"] == "Pet adopted"
    assert body["payload"]["uid"] == user["_id"]
    assert body["payload"]["pid"] == pet["_id"]
    assert body["payload"]["adoptionDate"] == "2024-11-21"

def test_adopted_pet_reports_adopted_and_owner(client, create_pet, register_user):
    pet = create_pet()
    user = register_user()
    client.post("/api/adoptions", json={"uid": user["_id"], "pid": pet["_id"]})

    pet_after = client.get(f"/api/pets/{pet['_id']}").get_json()["payload"]
    assert pet_after["adopted"] is True
    assert pet_after["owner"] == user["_id"]

    user_after = client.get(f"/api/users/{user['_id']}").get_json()["payload"]
    assert user_after["pets"] == [pet["_id"]]

def test_adoption_date_defaults_to_today(client, create_pet, register_user):
    pet = create_pet()
    user = register_user()

    response = client.post("/api/adoptions", json={"uid": user["_id"], "pid": pet["_id"]})

    assert response.status_code == 200
    assert response.get_json()["payload"]["adoptionDate"]

def test_adopting_same_pet_twice_fails(client, create_pet, register_user):
    pet = create_pet()
    first = register_user(email="uno@correofalso.com")
    second = register_user(email="dos@correofalso.com")
    assert client.post("/api/adoptions", json={"uid": first["_id"], "pid": pet["_id"]}).status_code == 200

    response = client.post("/api/adoptions", json={"uid": second["_id"], "pid": pet["_id"]})

    assert response.status_code == 400
    assert response.get_json()["error_code"] == "PET_ALREADY_ADOPTED"
    adoptions = client.get("/api/adoptions").get_json()["payload"]
    assert len([a for a in adoptions if a["pid"] == pet["_id"]]) == 1

def test_adopt_with_unknown_user_returns_404(client, create_pet):
    pet = create_pet()

    response = client.post("/api/adoptions", json={"uid": "ghost", "pid": pet["_id"]})

    assert response.status_code == 404
    assert client.get(f"/api/pets/{pet['_id']}").get_json()["payload"]["adopted"] is False

def test_adopt_with_unknown_pet_returns_404(client, register_user):
    user = register_user()

    response = client.post("/api/adoptions", json={"uid": user["_id"], "pid": "ghost"})

    assert response.status_code == 404

def test_adopt_with_missing_fields_returns_400(client):
    response = client.post("/api/adoptions", json={"uid": "someone"})

    assert response.status_code == 400
    assert "pid" in response.get_json()["details"]

def test_adopt_by_path_params(client, create_pet, register_user):
    pet = create_pet()
    user = register_user()

    response = client.post(f"/api/adoptions/{user['_id']}/{pet['_id']}")

    assert response.status_code == 200
    assert response.get_json()["message"] == "Pet adopted"

def test_lost_race_on_adoption_flag_is_rejected(app, create_pet, register_user):
    """조회 이후 다른 요청이 먼저 입양한 경우 조건부 업데이트가 실패해야 함"""
    pet = create_pet()
    user = register_user()
    adoption_service = app.services['adoptions']

    with patch.object(adoption_service.pet_service, 'mark_adopted', return_value=None):
        with pytest.raises(AlreadyAdoptedError):
            adoption_service.adopt(user["_id"], pet["_id"])

    assert adoption_service.list_adoptions() == []

def test_pet_deleted_before_adoption_flag_returns_404(app, create_pet, register_user):
    """조회 이후 반려동물이 삭제되면 이미 입양됨이 아니라 404여야 함"""
    pet = create_pet()
    user = register_user()
    adoption_service = app.services['adoptions']
    pet_service = adoption_service.pet_service
    real_mark_adopted = pet_service.mark_adopted

    def delete_then_mark(pet_id, owner_id):
        pet_service.delete_pet(pet_id)
        return real_mark_adopted(pet_id, owner_id)

    with patch.object(pet_service, 'mark_adopted', side_effect=delete_then_mark):
        with pytest.raises(NotFoundError):
            adoption_service.adopt(user["_id"], pet["_id"])

    assert adoption_service.list_adoptions() == []

def test_failed_adoption_insert_reverts_pet_flag(app, create_pet, register_user):
    pet = create_pet()
    user = register_user()
    adoption_service = app.services['adoptions']

    with patch.object(adoption_service.adoptions_ref, 'insert_one', side_effect=PyMongoError("boom")):
        with pytest.raises(PyMongoError):
            adoption_service.adopt(user["_id"], pet["_id"])

    assert adoption_service.pet_service.get_pet(pet["_id"]).adopted is False

def test_get_adoptions_envelope(client, create_pet, register_user):
    pet = create_pet()
    user = register_user()
    client.post("/api/adoptions", json={"uid": user["_id"], "pid": pet["_id"]})

    response = client.get("/api/adoptions")

    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "success"
    assert isinstance(body["payload"], list)
    assert len(body["payload"]) == 1

def test_get_adoption_by_id(client, create_pet, register_user):
    pet = create_pet()
    user = register_user()
    created = client.post("/api/adoptions", json={"uid": user["_id"], "pid": pet["_id"]}).get_json()["payload"]

    response = client.get(f"/api/adoptions/{created['_id']}")

    assert response.status_code == 200
    assert response.get_json()["payload"]["pid"] == pet["_id"]

def test_get_unknown_adoption_returns_404(client):
    assert client.get("/api/adoptions/ghost").status_code == 404
