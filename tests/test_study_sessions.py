"""Tests for study session API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient

from wordrecall import models


def _start(client: TestClient, word_list_id: int, headers: dict[str, str]) -> str:
    response = client.post(f"/api/v1/lists/{word_list_id}/study-sessions", headers=headers)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["session_id"]


def _attempt(client: TestClient, session_id: str, text: str, headers: dict[str, str]) -> dict:
    response = client.post(
        f"/api/v1/study-sessions/{session_id}/attempts", json={"input": text}, headers=headers
    )
    assert response.status_code == status.HTTP_200_OK
    return response.json()


class TestStartStudySession:
    """Test suite for POST /lists/:id/study-sessions."""

    def test_start_session(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        response = client.post(
            f"/api/v1/lists/{test_word_list.id}/study-sessions", headers=auth_headers
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["session_id"]
        assert data["word_list_id"] == test_word_list.id
        assert data["list_name"] == "Fruit"
        assert data["status"] == "active"
        assert data["remembered_count"] == 0
        assert data["total_words"] == 3
        assert data["progress_percent"] == 0
        assert data["recently_remembered"] == []

    def test_anyone_can_study_a_shared_list(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        other_auth_headers: dict[str, str],
    ) -> None:
        response = client.post(
            f"/api/v1/lists/{test_word_list.id}/study-sessions", headers=other_auth_headers
        )

        assert response.status_code == status.HTTP_201_CREATED

    def test_start_session_list_not_found(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/v1/lists/99999/study-sessions", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSubmitAttempt:
    """Test suite for POST /study-sessions/:id/attempts."""

    def test_success_duplicate_and_error(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        session_id = _start(client, test_word_list.id, auth_headers)

        first = _attempt(client, session_id, "  apple ", auth_headers)
        assert first["feedback"] == {
            "type": "success",
            "word": "APPLE",
            "definition": "keeps the doctor away",
        }
        assert first["progress"]["remembered_count"] == 1
        assert first["progress"]["progress_percent"] == 100 / 3

        again = _attempt(client, session_id, "Apple", auth_headers)
        assert again["feedback"] == {"type": "duplicate", "word": "APPLE", "definition": None}
        assert again["progress"]["remembered_count"] == 1

        wrong = _attempt(client, session_id, "grape", auth_headers)
        assert wrong["feedback"] == {"type": "error", "word": "GRAPE", "definition": None}
        assert wrong["progress"]["incorrect_count"] == 1

        wrong_again = _attempt(client, session_id, "GRAPE", auth_headers)
        assert wrong_again["feedback"]["type"] == "error"
        assert wrong_again["progress"]["incorrect_count"] == 1

    def test_blank_input_is_ignored(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        session_id = _start(client, test_word_list.id, auth_headers)

        data = _attempt(client, session_id, "   ", auth_headers)

        assert data["feedback"] is None
        assert data["progress"]["remembered_count"] == 0
        assert data["progress"]["incorrect_count"] == 0

    def test_overlong_input_is_an_error(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        session_id = _start(client, test_word_list.id, auth_headers)

        data = _attempt(client, session_id, "x" * 300, auth_headers)

        assert data["feedback"] == {"type": "error", "word": "X" * 300, "definition": None}
        assert data["progress"]["incorrect_count"] == 1

    def test_recently_remembered_newest_first(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        session_id = _start(client, test_word_list.id, auth_headers)
        _attempt(client, session_id, "banana", auth_headers)
        _attempt(client, session_id, "cherry", auth_headers)

        response = client.get(f"/api/v1/study-sessions/{session_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        recent = response.json()["recently_remembered"]
        assert [w["word"] for w in recent] == ["CHERRY", "BANANA"]

    def test_session_of_other_user_is_not_found(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
    ) -> None:
        session_id = _start(client, test_word_list.id, auth_headers)

        response = client.post(
            f"/api/v1/study-sessions/{session_id}/attempts",
            json={"input": "apple"},
            headers=other_auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_session(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/v1/study-sessions/does-not-exist/attempts",
            json={"input": "apple"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_edit_does_not_reach_running_session(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        session_id = _start(client, test_word_list.id, auth_headers)
        client.put(
            f"/api/v1/lists/{test_word_list.id}",
            json={"name": "Other", "words_text": "kiwi"},
            headers=auth_headers,
        )

        assert _attempt(client, session_id, "kiwi", auth_headers)["feedback"]["type"] == "error"
        assert _attempt(client, session_id, "apple", auth_headers)["feedback"]["type"] == "success"


class TestFinishStudySession:
    """Test suite for POST /study-sessions/:id/finish and GET /lists/:id/results."""

    def test_finish_two_word_list_half_remembered(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
    ) -> None:
        created = client.post(
            "/api/v1/lists",
            json={"name": "Letters", "words_text": "AA first\nAB second"},
            headers=auth_headers,
        ).json()
        session_id = _start(client, created["id"], auth_headers)
        _attempt(client, session_id, "aa", auth_headers)
        _attempt(client, session_id, "zz", auth_headers)

        response = client.post(f"/api/v1/study-sessions/{session_id}/finish", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "list_name": "Letters",
            "total_words": 2,
            "score": 50,
            "remembered": [{"word": "AA", "definition": "first"}],
            "missed": [{"word": "AB", "definition": "second"}],
            "incorrect": ["ZZ"],
        }

    def test_score_comes_from_summary(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        session_id = _start(client, test_word_list.id, auth_headers)
        _attempt(client, session_id, "apple", auth_headers)
        _attempt(client, session_id, "cherry", auth_headers)

        finished = client.post(f"/api/v1/study-sessions/{session_id}/finish", headers=auth_headers)
        latest = client.get(f"/api/v1/lists/{test_word_list.id}/results", headers=auth_headers)

        assert finished.json()["score"] == 67
        assert latest.json()["score"] == 67

    def test_finished_session_is_closed(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        session_id = _start(client, test_word_list.id, auth_headers)
        client.post(f"/api/v1/study-sessions/{session_id}/finish", headers=auth_headers)

        response = client.post(
            f"/api/v1/study-sessions/{session_id}/attempts",
            json={"input": "apple"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_latest_results(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        results_url = f"/api/v1/lists/{test_word_list.id}/results"
        assert client.get(results_url, headers=auth_headers).status_code == 404

        session_id = _start(client, test_word_list.id, auth_headers)
        for word in ("apple", "banana", "cherry"):
            _attempt(client, session_id, word, auth_headers)
        client.post(f"/api/v1/study-sessions/{session_id}/finish", headers=auth_headers)

        response = client.get(results_url, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["score"] == 100
        assert data["missed"] == []

    def test_results_are_per_user(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
    ) -> None:
        session_id = _start(client, test_word_list.id, auth_headers)
        client.post(f"/api/v1/study-sessions/{session_id}/finish", headers=auth_headers)

        response = client.get(
            f"/api/v1/lists/{test_word_list.id}/results", headers=other_auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_deleting_list_discards_results(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        list_id = test_word_list.id
        session_id = _start(client, list_id, auth_headers)
        client.post(f"/api/v1/study-sessions/{session_id}/finish", headers=auth_headers)

        client.delete(f"/api/v1/lists/{list_id}", headers=auth_headers)

        response = client.get(f"/api/v1/lists/{list_id}/results", headers=auth_headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND


def test_abandon_session(
    client: TestClient,
    test_word_list: models.WordList,
    auth_headers: dict[str, str],
) -> None:
    session_id = _start(client, test_word_list.id, auth_headers)

    response = client.delete(f"/api/v1/study-sessions/{session_id}", headers=auth_headers)
    assert response.status_code == status.HTTP_200_OK

    response = client.get(f"/api/v1/study-sessions/{session_id}", headers=auth_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert client.get(
        f"/api/v1/lists/{test_word_list.id}/results", headers=auth_headers
    ).status_code == status.HTTP_404_NOT_FOUND
