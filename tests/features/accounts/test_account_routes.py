class TestAccountEndpoints:
    def create_account(self, client, first_name, last_name="", **fields) -> dict:
        response = client.post(
            "/api/v1/accounts", json={"first_name": first_name, "last_name": last_name, **fields}
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    def test_defaults(self, client):
        account = self.create_account(client, "Ada", "Lovelace")

        assert account["role"] == "student"
        assert account["status"] == "active"
        assert account["photo"] is None

    def test_invalid_role(self, client):
        response = client.post("/api/v1/accounts", json={"first_name": "Ada", "role": "janitor"})
        assert response.status_code == 422

    def test_photo_must_be_an_id(self, client):
        response = client.post("/api/v1/accounts", json={"first_name": "Ada", "photo": "me.png"})
        assert response.status_code == 400

    def test_block_account(self, client):
        account = self.create_account(client, "Ada", "Lovelace", role="teacher")

        data = client.patch(f"/api/v1/accounts/{account['id']}", json={"status": "blocked"}).json()["data"]

        assert data["status"] == "blocked"
        assert data["role"] == "teacher"

    def test_find_by_name_matches_first_or_last(self, client):
        self.create_account(client, "Ada", "Lovelace")
        self.create_account(client, "Grace", "Hopper")
        self.create_account(client, "Love", "Bug")

        data = client.get("/api/v1/accounts", params={"name": "love"}).json()["data"]
        assert sorted(a["first_name"] for a in data) == ["Ada", "Love"]

    def test_find_by_role_and_status(self, client):
        self.create_account(client, "Ada", role="teacher")
        blocked = self.create_account(client, "Grace", role="teacher")
        self.create_account(client, "Linus")
        client.patch(f"/api/v1/accounts/{blocked['id']}", json={"status": "blocked"})

        data = client.get("/api/v1/accounts", params={"role": "teacher", "status": "active"}).json()["data"]
        assert [a["first_name"] for a in data] == ["Ada"]

    def test_delete(self, client):
        account = self.create_account(client, "Ada")

        assert client.delete(f"/api/v1/accounts/{account['id']}").status_code == 200
        assert client.get(f"/api/v1/accounts/{account['id']}").status_code == 404
        assert client.get("/api/v1/accounts", params={"name": "ada"}).json()["data"] == []

    def test_explicit_null_clears_photo(self, client):
        photo_id = "01890a5d-ac96-774b-bcce-b302099a8057"
        account = self.create_account(client, "Ada", photo=photo_id)
        assert account["photo"] == photo_id

        data = client.patch(f"/api/v1/accounts/{account['id']}", json={"photo": None}).json()["data"]

        assert data["photo"] is None
        assert data["first_name"] == "Ada"

    def test_explicit_null_on_required_field_is_ignored(self, client):
        account = self.create_account(client, "Ada", "Lovelace")

        response = client.patch(f"/api/v1/accounts/{account['id']}", json={"first_name": None})

        assert response.status_code == 200
        assert response.json()["data"]["first_name"] == "Ada"
