"""API tests for album endpoints."""

import pytest

from tests.shared.fixtures.api_client import auth_headers

ALBUM_BODY = {
    "coordinate": {"latitude": 35.6762, "longitude": 139.6503},
    "image_urls": [
        "https://example.com/photos/shibuya.jpg",
        "https://photos.s3.ap-northeast-1.amazonaws.com/9f8e7d6c",
    ],
}


@pytest.fixture
def albums_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/albums"


@pytest.fixture
def octocat_album(test_client, albums_url, octocat) -> dict:
    response = test_client.post(
        albums_url,
        json=ALBUM_BODY,
        headers=auth_headers(octocat["token"]),
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateAlbum:
    def test_create(self, test_client, octocat, octocat_album):
        assert octocat_album["owner_id"] == octocat["user"]["id"]
        assert octocat_album["coordinate"] == ALBUM_BODY["coordinate"]
        assert octocat_album["image_urls"] == ALBUM_BODY["image_urls"]
        assert octocat_album["created_at"] == octocat_album["updated_at"]

    def test_requires_authentication(self, test_client, albums_url):
        response = test_client.post(albums_url, json=ALBUM_BODY)
        assert response.status_code == 401

    def test_coordinate_out_of_bounds(self, test_client, albums_url, octocat):
        body = {**ALBUM_BODY, "coordinate": {"latitude": 95, "longitude": 0}}

        response = test_client.post(
            albums_url,
            json=body,
            headers=auth_headers(octocat["token"]),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "COORDINATE_OUT_OF_BOUNDS"

    def test_invalid_image_url(self, test_client, albums_url, octocat):
        body = {**ALBUM_BODY, "image_urls": ["https://example.com/doc.pdf"]}

        response = test_client.post(
            albums_url,
            json=body,
            headers=auth_headers(octocat["token"]),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_URL_FORMAT"

    def test_too_many_images(self, test_client, albums_url, octocat):
        urls = [f"https://example.com/{n}.jpg" for n in range(11)]

        response = test_client.post(
            albums_url,
            json={**ALBUM_BODY, "image_urls": urls},
            headers=auth_headers(octocat["token"]),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "ENTITY_VALIDATION_ERROR"


class TestReadAlbums:
    def test_list_and_get(self, test_client, albums_url, octocat_album):
        listed = test_client.get(albums_url)
        fetched = test_client.get(f"{albums_url}/{octocat_album['id']}")

        assert listed.status_code == 200
        assert [a["id"] for a in listed.json()] == [octocat_album["id"]]
        assert fetched.json() == octocat_album

    def test_filter_by_owner(self, test_client, albums_url, octocat_album, hubot):
        mine = test_client.get(albums_url, params={"owner_id": hubot["user"]["id"]})

        assert mine.status_code == 200
        assert mine.json() == []

    def test_mine(self, test_client, albums_url, octocat, octocat_album, hubot):
        octocat_albums = test_client.get(
            f"{albums_url}/mine",
            headers=auth_headers(octocat["token"]),
        )
        hubot_albums = test_client.get(
            f"{albums_url}/mine",
            headers=auth_headers(hubot["token"]),
        )

        assert [a["id"] for a in octocat_albums.json()] == [octocat_album["id"]]
        assert hubot_albums.json() == []

    def test_invalid_owner_filter(self, test_client, albums_url):
        response = test_client.get(albums_url, params={"owner_id": "nope"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ID"

    def test_unknown_album(self, test_client, albums_url):
        response = test_client.get(
            f"{albums_url}/3f2504e0-4f89-41d3-9a0c-0305e82c3301"
        )

        assert response.status_code == 404
        assert response.json()["code"] == "ALBUM_NOT_FOUND"


class TestAlbumImages:
    def test_owner_adds_and_removes(self, test_client, albums_url, octocat, octocat_album):
        images_url = f"{albums_url}/{octocat_album['id']}/images"
        headers = auth_headers(octocat["token"])
        new_url = "https://example.com/photos/tower.png"

        added = test_client.post(images_url, json={"image_url": new_url}, headers=headers)
        removed = test_client.request(
            "DELETE",
            images_url,
            json={"image_url": ALBUM_BODY["image_urls"][0]},
            headers=headers,
        )

        assert added.status_code == 200
        assert added.json()["image_urls"][-1] == new_url
        assert removed.status_code == 200
        assert removed.json()["image_urls"] == [ALBUM_BODY["image_urls"][1], new_url]

    def test_non_owner_cannot_add(self, test_client, albums_url, octocat_album, hubot):
        response = test_client.post(
            f"{albums_url}/{octocat_album['id']}/images",
            json={"image_url": "https://example.com/photos/x.jpg"},
            headers=auth_headers(hubot["token"]),
        )

        assert response.status_code == 403
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_last_image_cannot_be_removed(self, test_client, albums_url, octocat):
        headers = auth_headers(octocat["token"])
        created = test_client.post(
            albums_url,
            json={**ALBUM_BODY, "image_urls": ALBUM_BODY["image_urls"][:1]},
            headers=headers,
        ).json()

        response = test_client.request(
            "DELETE",
            f"{albums_url}/{created['id']}/images",
            json={"image_url": ALBUM_BODY["image_urls"][0]},
            headers=headers,
        )

        assert response.status_code == 400
        assert "last image" in response.json()["detail"]

    def test_failed_mutation_is_not_persisted(
        self, test_client, albums_url, octocat, octocat_album
    ):
        response = test_client.post(
            f"{albums_url}/{octocat_album['id']}/images",
            json={"image_url": ALBUM_BODY["image_urls"][0]},
            headers=auth_headers(octocat["token"]),
        )
        fetched = test_client.get(f"{albums_url}/{octocat_album['id']}").json()

        assert response.status_code == 400
        assert fetched["image_urls"] == ALBUM_BODY["image_urls"]


class TestDeleteAlbum:
    def test_owner_deletes(self, test_client, albums_url, octocat, octocat_album):
        response = test_client.delete(
            f"{albums_url}/{octocat_album['id']}",
            headers=auth_headers(octocat["token"]),
        )

        assert response.status_code == 204
        assert test_client.get(f"{albums_url}/{octocat_album['id']}").status_code == 404

    def test_non_owner_cannot_delete(self, test_client, albums_url, octocat_album, hubot):
        response = test_client.delete(
            f"{albums_url}/{octocat_album['id']}",
            headers=auth_headers(hubot["token"]),
        )

        assert response.status_code == 403
        assert test_client.get(f"{albums_url}/{octocat_album['id']}").status_code == 200

    def test_delete_unknown(self, test_client, albums_url, octocat):
        response = test_client.delete(
            f"{albums_url}/3f2504e0-4f89-41d3-9a0c-0305e82c3301",
            headers=auth_headers(octocat["token"]),
        )

        assert response.status_code == 404
