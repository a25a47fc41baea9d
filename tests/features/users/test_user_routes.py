class TestUserEndpoints:
    def test_create_user(self, client):
        response = client.post(
            "/api/v1/users",
            json={"telegram_username": "john_doe", "username": "john", "first_name": "John"},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["telegram_username"] == "john_doe"
        assert data["role"] == "student"
        assert data["last_name"] == ""
        assert "deleted_at" not in data

    def test_duplicate_telegram_username(self, client, create_user):
        create_user("john_doe")
        response = client.post("/api/v1/users", json={"telegram_username": "john_doe", "username": "other"})
        assert response.status_code == 409

    def test_telegram_username_reusable_after_delete(self, client, create_user):
        user = create_user("john_doe")
        client.delete(f"/api/v1/users/{user['id']}")

        response = client.post("/api/v1/users", json={"telegram_username": "john_doe", "username": "again"})
        assert response.status_code == 201

    def test_get_user(self, client, create_user):
        user = create_user("john_doe")
        response = client.get(f"/api/v1/users/{user['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["username"] == "john_doe"

    def test_get_user_bad_id(self, client):
        assert client.get("/api/v1/users/not-an-id").status_code == 400

    def test_get_missing_user(self, client):
        assert client.get("/api/v1/users/01890a5d-ac96-774b-bcce-b302099a8057").status_code == 404

    def test_partial_update(self, client, create_user):
        user = create_user("john_doe", first_name="John", last_name="Doe")

        response = client.patch(f"/api/v1/users/{user['id']}", json={"last_name": "Smith"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["first_name"] == "John"
        assert data["last_name"] == "Smith"

    def test_empty_update_is_noop(self, client, create_user):
        user = create_user("john_doe", first_name="John")

        response = client.patch(f"/api/v1/users/{user['id']}", json={})

        assert response.status_code == 200
        assert response.json()["data"]["first_name"] == "John"

    def test_update_missing_user(self, client):
        response = client.patch(
            "/api/v1/users/01890a5d-ac96-774b-bcce-b302099a8057", json={"first_name": "X"}
        )
        assert response.status_code == 404

    def test_delete_user(self, client, create_user):
        user = create_user("john_doe")

        assert client.delete(f"/api/v1/users/{user['id']}").status_code == 200
        assert client.get(f"/api/v1/users/{user['id']}").status_code == 404
        assert client.delete(f"/api/v1/users/{user['id']}").status_code == 404

    def test_find_users(self, client, create_user):
        create_user("john_doe")
        create_user("jane_doe", role="admin")
        create_user("bob")

        by_name = client.get("/api/v1/users", params={"username": "DOE"}).json()["data"]
        assert sorted(u["username"] for u in by_name) == ["jane_doe", "john_doe"]

        by_role = client.get("/api/v1/users", params={"role": "admin"}).json()["data"]
        assert [u["username"] for u in by_role] == ["jane_doe"]

        exact = client.get("/api/v1/users", params={"telegram_username": "john"}).json()["data"]
        assert exact == []

    def test_find_excludes_deleted(self, client, create_user):
        user = create_user("john_doe")
        create_user("jane_doe")
        client.delete(f"/api/v1/users/{user['id']}")

        data = client.get("/api/v1/users").json()["data"]
        assert [u["username"] for u in data] == ["jane_doe"]
