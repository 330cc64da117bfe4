"""
Tests for the /categories endpoints.
"""
import uuid

MISSING_ID = "6f1f3b8e-2c4a-4e55-9d0c-000000000000"


class TestCategoryList:

    def test_empty_list_is_no_content(self, client):
        response = client.get("/categories")
        assert response.status_code == 204
        assert response.content == b""

    def test_list_returns_created_categories(self, client):
        client.post("/categories", json={"name": "Electronics"})
        client.post("/categories", json={"name": "Groceries"})

        response = client.get("/categories")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Electronics", "Groceries"]


class TestCategoryCreate:

    def test_create_generates_uuid(self, client):
        response = client.post("/categories", json={"name": "Electronics"})
        assert response.status_code == 201

        body = response.json()
        assert body["name"] == "Electronics"
        uuid.UUID(body["id"])

    def test_duplicate_name_is_conflict(self, client):
        client.post("/categories", json={"name": "Electronics"})
        response = client.post("/categories", json={"name": "Electronics"})

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "Duplicate entry"
        assert body["field"] == "name"
        assert len(client.get("/categories").json()) == 1

    def test_conflict_does_not_leak_store_error(self, client):
        client.post("/categories", json={"name": "Electronics"})
        response = client.post("/categories", json={"name": "Electronics"})

        assert "constraint" not in response.text.lower()

    def test_names_are_case_sensitive_by_default(self, client):
        client.post("/categories", json={"name": "Electronics"})
        response = client.post("/categories", json={"name": "electronics"})
        assert response.status_code == 201

    def test_names_case_insensitive_when_configured(self, case_insensitive_client):
        case_insensitive_client.post("/categories", json={"name": "Electronics"})
        response = case_insensitive_client.post("/categories", json={"name": "ELECTRONICS"})

        assert response.status_code == 409
        assert response.json()["field"] == "name"

    def test_empty_name_is_rejected(self, client):
        for body in ({"name": ""}, {"name": "   "}, {}):
            response = client.post("/categories", json=body)
            assert response.status_code == 400
            assert response.json()["error"] == "Validation failed"
            assert response.json()["field"] == "name"

        assert client.get("/categories").status_code == 204

    def test_malformed_json_is_bad_request(self, client):
        response = client.post(
            "/categories",
            content="{\"name\": ",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"

    def test_client_supplied_id_is_ignored(self, client):
        chosen = str(uuid.uuid4())
        response = client.post("/categories", json={"id": chosen, "name": "Electronics"})
        assert response.status_code == 201
        assert response.json()["id"] != chosen


class TestCategoryGetUpdateDelete:

    def test_get_by_id(self, client, category):
        response = client.get(f"/categories/{category['id']}")
        assert response.status_code == 200
        assert response.json() == category

    def test_get_missing_is_not_found(self, client):
        response = client.get(f"/categories/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json() == {"error": "Category not found"}

    def test_get_malformed_id_is_not_found(self, client):
        assert client.get("/categories/not-a-uuid").status_code == 404

    def test_update_renames(self, client, category):
        response = client.put(f"/categories/{category['id']}", json={"name": "Computers"})
        assert response.status_code == 200
        assert response.json() == {"id": category["id"], "name": "Computers"}

    def test_update_keeps_primary_key(self, client, category):
        response = client.put(
            f"/categories/{category['id']}",
            json={"id": str(uuid.uuid4()), "name": "Computers"},
        )
        assert response.status_code == 200
        assert response.json()["id"] == category["id"]

    def test_update_to_existing_name_is_conflict(self, client, category):
        other = client.post("/categories", json={"name": "Groceries"}).json()

        response = client.put(f"/categories/{other['id']}", json={"name": "Electronics"})
        assert response.status_code == 409
        assert response.json()["field"] == "name"

    def test_update_with_same_name_is_allowed(self, client, category):
        response = client.put(f"/categories/{category['id']}", json={"name": "Electronics"})
        assert response.status_code == 200

    def test_update_with_empty_name_is_rejected(self, client, category):
        response = client.put(f"/categories/{category['id']}", json={"name": ""})
        assert response.status_code == 400
        assert client.get(f"/categories/{category['id']}").json()["name"] == "Electronics"

    def test_update_missing_is_not_found(self, client):
        response = client.put(f"/categories/{MISSING_ID}", json={"name": "Computers"})
        assert response.status_code == 404

    def test_delete_twice(self, client, category):
        first = client.delete(f"/categories/{category['id']}")
        second = client.delete(f"/categories/{category['id']}")

        assert first.status_code == 204
        assert second.status_code == 404
        assert second.json() == {"error": "Category not found"}

    def test_delete_referenced_category_is_conflict(self, client, product):
        category_id = product["category"]["id"]

        response = client.delete(f"/categories/{category_id}")
        assert response.status_code == 409
        assert response.json()["error"] == "Resource in use"
        assert client.get(f"/categories/{category_id}").status_code == 200
