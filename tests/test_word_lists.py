"""Tests for word list API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from wordrecall import models

WORDS_TEXT = "zebra striped horse\napple a red fruit\n\n   mango   \n  cherry   small and red  "


class TestCreateWordList:
    """Test suite for POST /lists."""

    def test_create_word_list_success(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        auth_headers: dict[str, str],
    ) -> None:
        response = client.post(
            "/api/v1/lists",
            json={"name": "  Mixed bag  ", "words_text": WORDS_TEXT},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Mixed bag"
        assert data["word_count"] == 4
        assert data["is_owner"] is True
        assert data["owner"] == {"id": test_user.id, "display_name": "Alice"}
        # Details are alphabetical
        assert data["words"] == [
            {"word": "APPLE", "definition": "a red fruit"},
            {"word": "CHERRY", "definition": "small and red"},
            {"word": "MANGO", "definition": None},
            {"word": "ZEBRA", "definition": "striped horse"},
        ]

        # Stored in input order
        db_words = (
            db_session.query(models.Word)
            .filter_by(word_list_id=data["id"])
            .order_by(models.Word.position)
            .all()
        )
        assert [w.word for w in db_words] == ["ZEBRA", "APPLE", "MANGO", "CHERRY"]

    def test_create_word_list_keeps_duplicates(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/lists",
            json={"name": "Dupes", "words_text": "dog first\nDOG second"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["word_count"] == 2

    def test_create_word_list_missing_name(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/lists",
            json={"name": "   ", "words_text": "apple"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Name is required"

    def test_create_word_list_missing_words(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/lists",
            json={"name": "Empty", "words_text": "\n   \n"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Words are required"

    def test_create_word_list_word_too_long(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/v1/lists",
            json={"name": "Long", "words_text": "apple\n" + "a" * 256 + " too long"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Word cannot exceed 255 characters"

    def test_create_word_list_requires_auth(self, client: TestClient, db_session: Session) -> None:
        response = client.post("/api/v1/lists", json={"name": "X", "words_text": "apple"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestGetWordLists:
    """Test suite for GET /lists."""

    def test_lists_are_shared_and_newest_first(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_auth_headers: dict[str, str],
        other_user: models.User,
    ) -> None:
        client.post(
            "/api/v1/lists", json={"name": "First", "words_text": "a\nb"}, headers=auth_headers
        )
        client.post(
            "/api/v1/lists",
            json={"name": "Second", "words_text": "c"},
            headers=other_auth_headers,
        )

        response = client.get("/api/v1/lists", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        lists = response.json()["word_lists"]
        assert [wl["name"] for wl in lists] == ["Second", "First"]
        assert [wl["word_count"] for wl in lists] == [1, 2]
        assert lists[0]["owner"] == {"id": other_user.id, "display_name": "bob"}
        assert "words" not in lists[0]

    def test_no_lists(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get("/api/v1/lists", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"word_lists": []}


class TestGetWordList:
    """Test suite for GET /lists/:id."""

    def test_get_word_list_sorted(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        response = client.get(f"/api/v1/lists/{test_word_list.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Fruit"
        assert [w["word"] for w in data["words"]] == ["APPLE", "BANANA", "CHERRY"]
        assert data["is_owner"] is True

    def test_get_word_list_of_other_user(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        other_auth_headers: dict[str, str],
    ) -> None:
        response = client.get(f"/api/v1/lists/{test_word_list.id}", headers=other_auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["is_owner"] is False

    def test_get_word_list_not_found(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/v1/lists/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Word list with id 99999 not found"

    def test_get_words_text_in_original_order(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        response = client.get(
            f"/api/v1/lists/{test_word_list.id}/words-text", headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["words_text"] == (
            "CHERRY small and red\nAPPLE keeps the doctor away\nBANANA"
        )


class TestUpdateWordList:
    """Test suite for PUT /lists/:id."""

    def test_update_replaces_all_words(
        self,
        client: TestClient,
        db_session: Session,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        response = client.put(
            f"/api/v1/lists/{test_word_list.id}",
            json={"name": "Citrus", "words_text": "lemon sour\nlime"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Citrus"
        assert data["words"] == [
            {"word": "LEMON", "definition": "sour"},
            {"word": "LIME", "definition": None},
        ]

        db_session.expire_all()
        words = db_session.query(models.Word).filter_by(word_list_id=test_word_list.id).all()
        assert sorted(w.word for w in words) == ["LEMON", "LIME"]

    def test_update_by_non_owner_is_forbidden(
        self,
        client: TestClient,
        db_session: Session,
        test_word_list: models.WordList,
        other_auth_headers: dict[str, str],
    ) -> None:
        response = client.put(
            f"/api/v1/lists/{test_word_list.id}",
            json={"name": "Hijacked", "words_text": "nope"},
            headers=other_auth_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "You can only edit your own word lists"

        db_session.expire_all()
        assert db_session.get(models.WordList, test_word_list.id).name == "Fruit"

    def test_update_with_no_words_leaves_list_untouched(
        self,
        client: TestClient,
        db_session: Session,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        response = client.put(
            f"/api/v1/lists/{test_word_list.id}",
            json={"name": "Fruit", "words_text": "   "},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

        db_session.expire_all()
        assert db_session.query(models.Word).filter_by(word_list_id=test_word_list.id).count() == 3

    def test_update_not_found(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.put(
            "/api/v1/lists/99999",
            json={"name": "X", "words_text": "a"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteWordList:
    """Test suite for DELETE /lists/:id."""

    def test_delete_word_list_removes_words(
        self,
        client: TestClient,
        db_session: Session,
        test_word_list: models.WordList,
        auth_headers: dict[str, str],
    ) -> None:
        list_id = test_word_list.id

        response = client.delete(f"/api/v1/lists/{list_id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True

        db_session.expire_all()
        assert db_session.get(models.WordList, list_id) is None
        assert db_session.query(models.Word).filter_by(word_list_id=list_id).count() == 0
        assert client.get(f"/api/v1/lists/{list_id}", headers=auth_headers).status_code == 404

    def test_delete_by_non_owner_is_forbidden(
        self,
        client: TestClient,
        test_word_list: models.WordList,
        other_auth_headers: dict[str, str],
    ) -> None:
        response = client.delete(f"/api/v1/lists/{test_word_list.id}", headers=other_auth_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["detail"] == "You can only delete your own word lists"

    def test_delete_not_found(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.delete("/api/v1/lists/99999", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
