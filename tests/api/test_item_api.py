"""아이템 카탈로그 API 테스트"""

from fastapi.testclient import TestClient


class TestGetItem:
    def test_food_definition(self, client: TestClient) -> None:
        resp = client.get("/items/canned_beans")
        assert resp.status_code == 200
        data = resp.json()
        assert data["item_type"] == "food"
        assert data["nutrition"] == 35
        assert data["condition"] == "Fresh"
        assert data["stackable"] is True

    def test_water_definition(self, client: TestClient) -> None:
        data = client.get("/items/sump_water_raw").json()
        assert data["item_type"] == "consumable"
        assert data["hydration"] == 30
        assert data["sickness_risk"] == 0.4
        assert data["condition"] is None

    def test_unknown_item(self, client: TestClient) -> None:
        resp = client.get("/items/unicorn_horn")
        assert resp.status_code == 404
        assert "unicorn_horn" in resp.json()["detail"]
