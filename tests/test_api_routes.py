"""End-to-end tests of the HTTP routes on in-memory stores."""
import io


def _create_user(client, username="alice", password="secret"):
    return client.post(
        "/api/Users",
        json={"username": username, "email": f"{username}@example.com", "password": password},
    )


def _create_trip_and_stage(client):
    _create_user(client)
    client.post("/api/Trips", json={"user_id": 1, "title": "Alps", "description": "Hike"})
    client.post("/api/Stages", json={"trip_id": 1, "user_id": 1, "title": "Day 1", "description": "d"})


class TestUserRoutes:

    def test_create_user(self, client):
        response = _create_user(client)
        assert response.status_code == 201
        assert response.json() == {"id": 1, "username": "alice", "email": "alice@example.com"}

    def test_password_never_returned(self, client):
        _create_user(client)
        assert "password" not in client.get("/api/Users/1").json()
        assert all("password" not in u for u in client.get("/api/Users").json())

    def test_invalid_username(self, client):
        response = client.post("/api/Users", json={"username": "null", "email": "a@b.c", "password": "p"})
        assert response.status_code == 400
        assert response.json()["detail"] == "invalid username"

    def test_duplicate_user(self, client):
        _create_user(client)
        assert _create_user(client).status_code == 409

    def test_login(self, client):
        _create_user(client)
        assert client.get("/api/Users/alice/secret").json()["id"] == 1
        assert client.get("/api/Users/alice/wrong").status_code == 403
        assert client.get("/api/Users/bob/secret").status_code == 404

    def test_update_and_delete(self, client):
        _create_user(client)
        response = client.put(
            "/api/Users/1",
            json={"id": 1, "username": "alice", "email": "new@example.com", "password": "secret"},
        )
        assert response.status_code == 204
        assert client.get("/api/Users/1").json()["email"] == "new@example.com"
        assert client.delete("/api/Users/1").status_code == 204
        assert client.get("/api/Users/1").status_code == 404

    def test_update_id_mismatch(self, client):
        _create_user(client)
        response = client.put(
            "/api/Users/2",
            json={"id": 1, "username": "alice", "email": "a@example.com", "password": "secret"},
        )
        assert response.status_code == 400


class TestTripStagePostRoutes:

    def test_nested_listings(self, client):
        _create_trip_and_stage(client)
        post = client.post("/api/Posts", json={"stage_id": 1, "trip_id": 1, "user_id": 1, "story": "Sunrise"})
        assert post.status_code == 201

        assert [t["id"] for t in client.get("/api/Trips/1/userTrips").json()] == [1]
        assert [s["id"] for s in client.get("/api/Stages/1/tripsStages").json()] == [1]
        assert [p["story"] for p in client.get("/api/Posts/1/stagePosts").json()] == ["Sunrise"]
        assert len(client.get("/api/Posts/1/tripPosts").json()) == 1

    def test_trip_for_missing_user(self, client):
        response = client.post("/api/Trips", json={"user_id": 3, "title": "t", "description": "d"})
        assert response.status_code == 400

    def test_update_missing_stage(self, client):
        _create_trip_and_stage(client)
        response = client.put(
            "/api/Stages/5",
            json={"id": 5, "trip_id": 1, "user_id": 1, "title": "t", "description": "d"},
        )
        assert response.status_code == 404

    def test_empty_story(self, client):
        _create_trip_and_stage(client)
        response = client.post("/api/Posts", json={"stage_id": 1, "trip_id": 1, "user_id": 1, "story": ""})
        assert response.status_code == 400
        assert response.json()["detail"] == "invalid story value"


class TestAttractionRoutes:

    def test_create_ignores_client_popularity(self, client):
        response = client.post(
            "/api/Attractions",
            json={"name": "Louvre", "description": "Museum", "popularity": "HIGH", "score": 40},
        )
        assert response.status_code == 201
        assert response.json()["popularity"] == "LOW"
        assert response.json()["score"] == 0

    def test_popular_attractions(self, client):
        client.post("/api/Attractions", json={"name": "Louvre", "description": "Museum"})
        for _ in range(11):
            client.put("/api/Attractions/1", json={"id": 1, "name": "Louvre", "description": "Museum"})
        popular = client.get("/popularAttractions").json()
        assert [(a["id"], a["popularity"], a["score"]) for a in popular] == [(1, "HIGH", 11)]

    def test_link_and_unlink(self, client):
        _create_trip_and_stage(client)
        client.post("/api/Attractions", json={"name": "Louvre", "description": "Museum"})

        link = client.post("/api/Attractions/1/1")
        assert link.status_code == 200
        assert link.json()["attraction_id"] == 1
        assert [a["name"] for a in client.get("/api/Attractions/1/allStageAttractions").json()] == ["Louvre"]

        assert client.delete("/api/Attractions/1/1").status_code == 204
        assert client.delete("/api/Attractions/1/1").status_code == 404
        assert client.get("/api/Attractions/1/allStageAttractions").json() == []

    def test_link_missing_stage(self, client):
        client.post("/api/Attractions", json={"name": "Louvre", "description": "Museum"})
        assert client.post("/api/Attractions/1/9").status_code == 400

    def test_client_popularity_in_any_form_is_discarded(self, client):
        response = client.post(
            "/api/Attractions",
            json={"name": "n", "description": "d", "popularity": "LEGENDARY", "score": -1},
        )
        assert response.status_code == 201
        assert (response.json()["popularity"], response.json()["score"]) == ("LOW", 0)

        response = client.put(
            "/api/Attractions/1",
            json={"id": 1, "name": "n", "description": "d", "popularity": "MEDIUM", "score": 99},
        )
        assert response.status_code == 204
        assert client.get("/api/Attractions/1").json()["score"] == 1


class TestImageRoutes:

    def test_upload_list_download_delete(self, client):
        upload = client.post(
            "/api/Images",
            data={"id": "img_1_5_a"},
            files={"file": ("photo.jpg", io.BytesIO(b"raw"), "image/jpeg")},
        )
        assert upload.status_code == 200
        assert upload.json()["status"] == "File img_1_5_a.jpg Uploaded Successfully"

        assert [i["name"] for i in client.get("/api/Images").json()] == ["img_1_5_a.jpg"]
        assert [i["name"] for i in client.get("/api/Images/5/stageImages").json()] == ["img_1_5_a.jpg"]
        assert client.get("/api/Images/6/stageImages").json() == []
        assert client.get("/api/Images/img_1_5_a").json()["uri"] == "memory://images/img_1_5_a.jpg"

        deleted = client.delete("/api/Images/img_1_5_a")
        assert deleted.status_code == 200
        assert not deleted.json()["error"]

    def test_duplicate_upload(self, client):
        files = {"file": ("photo.jpg", io.BytesIO(b"raw"), "image/jpeg")}
        client.post("/api/Images", data={"id": "p"}, files=files)
        files = {"file": ("photo.jpg", io.BytesIO(b"raw"), "image/jpeg")}
        response = client.post("/api/Images", data={"id": "p"}, files=files)
        assert response.status_code == 400
        assert response.json()["error"] is True

    def test_upload_without_file(self, client):
        response = client.post("/api/Images", data={"id": "p"})
        assert response.status_code == 400
        assert response.json()["status"] == "Invalid file or filename is null."

    def test_missing_image(self, client):
        assert client.get("/api/Images/nothing").status_code == 404
        response = client.delete("/api/Images/nothing")
        assert response.status_code == 404
        assert response.json()["status"] == "File with name nothing.jpg not found."


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
