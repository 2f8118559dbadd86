"""Tests for the games API endpoints."""


def upload(client, text: str, filename: str = "jogos.yaml"):
    return client.post(
        "/api/v1/games/upload",
        files={"file": (filename, text.encode("utf-8"), "application/x-yaml")},
    )


class TestUpload:
    def test_upload_returns_summary(self, client, games_yaml):
        response = upload(client, games_yaml)
        assert response.status_code == 200
        data = response.json()
        assert data["total_games"] == 3
        assert data["summary"] == [
            {"length": 7, "label": "07", "amount": 1},
            {"length": 6, "label": "06", "amount": 2},
        ]

    def test_malformed_upload_rejected(self, client):
        response = upload(client, "games: nope")
        assert response.status_code == 400
        assert "list of lists" in response.json()["detail"]

    def test_non_utf8_upload_rejected(self, client):
        response = client.post(
            "/api/v1/games/upload",
            files={"file": ("jogos.yaml", b"\xff\xfe\x00bad", "application/x-yaml")},
        )
        assert response.status_code == 400

    def test_too_large_upload_rejected(self, client, monkeypatch):
        from loteria.config import settings

        monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 10)
        response = upload(client, "- [1, 2, 3, 4, 5, 6]\n")
        assert response.status_code == 413


class TestGames:
    def test_nothing_loaded(self, client):
        response = client.get("/api/v1/games")
        assert response.status_code == 200
        assert response.json() == {"total_games": 0, "games": [], "summary": []}

    def test_games_survive_between_requests(self, client, games_yaml):
        upload(client, games_yaml)
        data = client.get("/api/v1/games").json()
        assert data["total_games"] == 3
        assert data["games"][0] == [1, 2, 3, 4, 5, 6]

    def test_summary(self, client, games_yaml):
        upload(client, games_yaml)
        response = client.get("/api/v1/games/summary")
        assert response.status_code == 200
        assert [row["label"] for row in response.json()] == ["07", "06"]

    def test_clear(self, client, games_yaml):
        upload(client, games_yaml)
        assert client.delete("/api/v1/games").json() == {"cleared": True}
        assert client.get("/api/v1/games").json()["total_games"] == 0
        assert client.delete("/api/v1/games").json() == {"cleared": False}


class TestCompare:
    def test_winners(self, client, games_yaml):
        upload(client, games_yaml)
        response = client.post("/api/v1/games/compare", json={"drawn": "6, 5, 4, 3, 2, 1"})
        assert response.status_code == 200
        data = response.json()
        assert data["drawn_numbers"] == [1, 2, 3, 4, 5, 6]
        assert data["total_games"] == 3
        assert data["has_winners"] is True
        assert data["results"] == [
            {"tier": 6, "label": "Sena", "amount": 1},
            {"tier": 4, "label": "Quadra", "amount": 1},
        ]

    def test_no_winners(self, client, games_yaml):
        upload(client, games_yaml)
        data = client.post("/api/v1/games/compare", json={"drawn": "40,41,42,43,44,45"}).json()
        assert data["has_winners"] is False
        assert data["results"] == []

    def test_malformed_token(self, client):
        upload(client, "- [1, 2, 3, 4, 5, 6]")
        data = client.post("/api/v1/games/compare", json={"drawn": "1,2,x,4,5,6"}).json()
        assert data["drawn_numbers"] == [1, 2, 4, 5, 6]
        assert data["results"] == [{"tier": 5, "label": "Quina", "amount": 1}]

    def test_without_games(self, client):
        data = client.post("/api/v1/games/compare", json={"drawn": "1,2,3,4,5,6"}).json()
        assert data["total_games"] == 0
        assert data["results"] == []

    def test_missing_drawn(self, client):
        response = client.post("/api/v1/games/compare", json={})
        assert response.status_code == 422


def test_compare_oversized_token(client):
    upload(client, "- [1, 2, 3, 4, 5, 6]")
    response = client.post("/api/v1/games/compare", json={"drawn": "1,2,3,4," + "9" * 5000})
    assert response.status_code == 200
    assert response.json()["results"] == [{"tier": 4, "label": "Quadra", "amount": 1}]
