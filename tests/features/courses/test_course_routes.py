import pytest

AUTHOR_ID = "01890a5d-ac96-774b-bcce-b302099a8057"


@pytest.fixture
def create_course(client):
    def _create_course(title: str, **fields) -> dict:
        payload = {"title": title, "author_id": AUTHOR_ID, **fields}
        response = client.post("/api/v1/courses", json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create_course


class TestCourseEndpoints:
    def test_create_course(self, create_course):
        course = create_course("Python basics", tags=["python", "intro", "python"])

        assert course["is_published"] is False
        assert course["author_id"] == AUTHOR_ID
        assert sorted(course["tags"]) == ["intro", "python"]

    def test_create_with_bad_author_id(self, client):
        response = client.post("/api/v1/courses", json={"title": "x", "author_id": "42"})
        assert response.status_code == 400

    def test_update_replaces_tags(self, client, create_course):
        course = create_course("Python basics", tags=["python", "intro"])

        response = client.patch(f"/api/v1/courses/{course['id']}", json={"tags": ["python", "advanced"]})

        assert response.status_code == 200
        assert sorted(response.json()["data"]["tags"]) == ["advanced", "python"]
        fetched = client.get(f"/api/v1/courses/{course['id']}").json()["data"]
        assert sorted(fetched["tags"]) == ["advanced", "python"]

    def test_update_keeps_unsent_fields(self, client, create_course):
        course = create_course("Python basics", description="Start here", tags=["python"])

        data = client.patch(f"/api/v1/courses/{course['id']}", json={"is_published": True}).json()["data"]

        assert data["is_published"] is True
        assert data["description"] == "Start here"
        assert data["tags"] == ["python"]

    def test_find_by_tags_matches_any(self, client, create_course):
        create_course("Python basics", tags=["python"])
        create_course("Go basics", tags=["go"])
        create_course("Cooking", tags=["food"])

        data = client.get("/api/v1/courses", params=[("tags", "python"), ("tags", "go")]).json()["data"]
        assert sorted(c["title"] for c in data) == ["Go basics", "Python basics"]

    def test_find_by_title_and_published(self, client, create_course):
        create_course("Python basics", is_published=True)
        create_course("Advanced python")
        create_course("Go basics", is_published=True)

        data = client.get("/api/v1/courses", params={"title": "PYTHON", "is_published": "true"}).json()["data"]
        assert [c["title"] for c in data] == ["Python basics"]

    def test_title_match_is_literal(self, client, create_course):
        create_course("100% python")
        create_course("1000 python tips")

        data = client.get("/api/v1/courses", params={"title": "100%"}).json()["data"]
        assert [c["title"] for c in data] == ["100% python"]

    def test_find_by_author(self, client, create_course):
        create_course("Python basics")
        other = client.post(
            "/api/v1/courses",
            json={"title": "Other", "author_id": "01890a5d-ac96-774b-bcce-b302099a8058"},
        )
        assert other.status_code == 201

        data = client.get("/api/v1/courses", params={"author_id": AUTHOR_ID}).json()["data"]
        assert [c["title"] for c in data] == ["Python basics"]

    def test_deleted_course_is_hidden(self, client, create_course):
        course = create_course("Python basics", tags=["python"])

        assert client.delete(f"/api/v1/courses/{course['id']}").status_code == 200
        assert client.get(f"/api/v1/courses/{course['id']}").status_code == 404
        assert client.get("/api/v1/courses", params={"tags": "python"}).json()["data"] == []
        assert client.patch(f"/api/v1/courses/{course['id']}", json={"title": "x"}).status_code == 404
