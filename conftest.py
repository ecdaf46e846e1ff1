# conftest.py
"""
공용 pytest 픽스처.

- app: 테스트 설정 + mongomock 기반의 Flask 앱 (테스트마다 새 DB)
- client: Flask 테스트 클라이언트 (쿠키 자동 저장)
- register_user / create_pet: 반복되는 준비 요청을 줄이기 위한 헬퍼
"""
import mongomock
import pytest

from adoptme import create_app


@pytest.fixture
def app():
    app = create_app('testing', mongo_client=mongomock.MongoClient())
    yield app
    app.services['db'].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register_user(client):
    def _register(email="edu@correofalso.com", password="1234", first_name="Edu", last_name="Galli"):
        response = client.post("/api/sessions/register", json={
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "password": password,
        })
        assert response.status_code == 201, response.get_json()
        return response.get_json()["payload"]
    return _register


@pytest.fixture
def create_pet(client):
    def _create(name="Rambo", specie="Pichicho", birth_date="2021-03-10"):
        response = client.post("/api/pets", json={"name": name, "specie": specie, "birthDate": birth_date})
        assert response.status_code == 200, response.get_json()
        return response.get_json()["payload"]
    return _create
