"""Unit tests for the User aggregate."""

from datetime import timedelta

import pytest

from geoalbum.domain.shared.exceptions import EntityValidationError
from geoalbum.domain.shared.result import Err, Ok
from geoalbum_identity.domain.user import USERNAME_MAX_LENGTH, User
from tests.shared.fixtures.builders import FIXED_TIME, make_user


class TestUserCreate:
    """Tests for User.create."""

    def test_create_minimal(self):
        result = User.create(external_id="583231", username="octocat")

        assert isinstance(result, Ok)
        user = result.value
        assert user.username == "octocat"
        assert user.avatar_url is None
        assert user.name is None
        assert user.created_at == user.updated_at

    def test_create_full_profile(self):
        result = User.create(
            external_id="583231",
            username="octo-cat",
            avatar_url="https://avatars.githubusercontent.com/u/583231",
            name="The Octocat",
        )

        assert isinstance(result, Ok)
        assert result.value.display_name == "The Octocat"

    def test_empty_name_and_avatar_stored_as_absent(self):
        user = User.create("583231", "octocat", avatar_url="", name="").unwrap()

        assert user.avatar_url is None
        assert user.name is None
        assert user.display_name == "octocat"

    @pytest.mark.parametrize("external_id", ["", "   "])
    def test_external_id_required(self, external_id):
        result = User.create(external_id=external_id, username="octocat")

        assert isinstance(result, Err)
        assert "External ID is required" in result.error.message

    @pytest.mark.parametrize(
        ("username", "message"),
        [
            ("", "Username is required"),
            ("   ", "Username is required"),
            ("a" * (USERNAME_MAX_LENGTH + 1), "39 characters or less"),
            ("octo_cat", "alphanumeric characters and hyphens"),
            ("octo cat", "alphanumeric characters and hyphens"),
            ("octocat\n", "alphanumeric characters and hyphens"),
        ],
    )
    def test_invalid_username(self, username, message):
        result = User.create(external_id="583231", username=username)

        assert isinstance(result, Err)
        assert isinstance(result.error, EntityValidationError)
        assert message in result.error.message

    def test_username_at_max_length(self):
        result = User.create("583231", "a" * USERNAME_MAX_LENGTH)
        assert isinstance(result, Ok)

    def test_invalid_avatar_url(self):
        result = User.create("583231", "octocat", avatar_url="not a url")

        assert isinstance(result, Err)
        assert "Invalid avatar URL format" in result.error.message


class TestUserUpdateProfile:
    """Tests for User.update_profile."""

    def test_update_all_fields(self):
        user = make_user()

        result = user.update_profile(
            username="octocat-2",
            avatar_url="https://example.com/new.png",
            name="Mona",
        )

        assert isinstance(result, Ok)
        assert user.username == "octocat-2"
        assert user.avatar_url == "https://example.com/new.png"
        assert user.name == "Mona"
        assert user.updated_at > FIXED_TIME
        assert user.created_at == FIXED_TIME

    def test_none_leaves_fields_unchanged(self):
        user = make_user()

        user.update_profile(name="Mona")

        assert user.username == "octocat"
        assert user.avatar_url == "https://avatars.githubusercontent.com/u/583231"

    def test_empty_string_clears_optional_fields(self):
        user = make_user()

        user.update_profile(avatar_url="", name="")

        assert user.avatar_url is None
        assert user.name is None
        assert user.display_name == "octocat"

    def test_no_op_still_bumps_updated_at(self):
        user = make_user()

        result = user.update_profile()

        assert isinstance(result, Ok)
        assert user.updated_at > FIXED_TIME

    def test_invalid_field_changes_nothing(self):
        user = make_user()

        result = user.update_profile(name="Mona", username="bad name!")

        assert isinstance(result, Err)
        assert user.name == "The Octocat"
        assert user.username == "octocat"
        assert user.updated_at == FIXED_TIME

    def test_username_with_trailing_newline_rejected(self):
        user = make_user()

        result = user.update_profile(username="octocat\n")

        assert isinstance(result, Err)
        assert user.username == "octocat"

    def test_invalid_avatar_changes_nothing(self):
        user = make_user()

        result = user.update_profile(username="mona", avatar_url="nope")

        assert isinstance(result, Err)
        assert user.username == "octocat"

    def test_updated_at_never_goes_back(self):
        user = make_user()
        future = FIXED_TIME + timedelta(days=365 * 100)
        user._updated_at = future

        user.update_profile(name="Mona")

        assert user.updated_at == future


class TestUserIdentity:
    def test_is_same_external_user(self):
        user = make_user(external_id="583231")

        assert user.is_same_external_user("583231")
        assert not user.is_same_external_user("9919")

    def test_equality_by_id(self):
        first = make_user(username="octocat")
        second = make_user(username="renamed")

        assert first == second
        assert hash(first) == hash(second)
