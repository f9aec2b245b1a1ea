"""Unit tests for the ImageUrl value object."""

import pytest

from geoalbum.domain.album import ImageUrl, InvalidImageUrlError
from geoalbum.domain.shared.exceptions import ErrorCode
from geoalbum.domain.shared.result import Err, Ok


class TestImageUrlValid:
    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/photo.jpg",
            "http://example.com/photo.jpeg",
            "https://example.com/a/b/photo.PNG",
            "https://example.com/anim.gif",
            "https://example.com/photo.webp?size=large",
            "https://photos.s3.amazonaws.com/9f8e7d6c",
            "https://photos.s3.ap-northeast-1.amazonaws.com/uploads/abc",
            "https://s3.eu-west-1.amazonaws.com/bucket/key",
        ],
    )
    def test_accepted(self, url):
        result = ImageUrl.create(url)
        assert isinstance(result, Ok)

    def test_normalizes_whitespace_scheme_and_host(self):
        result = ImageUrl.create("  HTTPS://Example.COM/Photos/A.jpg  ")

        assert isinstance(result, Ok)
        assert result.value.value == "https://example.com/Photos/A.jpg"

    def test_equality_uses_normalized_value(self):
        assert ImageUrl("https://EXAMPLE.com/a.jpg") == ImageUrl(
            " https://example.com/a.jpg"
        )


class TestImageUrlInvalid:
    @pytest.mark.parametrize(
        ("url", "reason"),
        [
            ("", "cannot be empty"),
            ("   ", "cannot be empty"),
            ("ftp://example.com/photo.jpg", "only http and https"),
            ("javascript:alert(1)", "only http and https"),
            ("https://example.com/document.pdf", "must be a valid image file"),
            ("https://example.com/icon.svg", "must be a valid image file"),
            ("https://evil.example.com/s3.amazonaws.com", "must be a valid image"),
        ],
    )
    def test_rejected_with_reason(self, url, reason):
        result = ImageUrl.create(url)

        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidImageUrlError)
        assert result.error.code == ErrorCode.INVALID_URL_FORMAT
        assert reason in result.error.message

    def test_relative_url_rejected(self):
        assert isinstance(ImageUrl.create("/photos/a.jpg"), Err)

    def test_url_without_host_rejected(self):
        assert isinstance(ImageUrl.create("https:///photo.jpg"), Err)

    def test_lookalike_storage_host_rejected(self):
        assert isinstance(ImageUrl.create("https://s3.amazonaws.com.evil.io/k"), Err)

    def test_direct_construction_raises(self):
        with pytest.raises(InvalidImageUrlError):
            ImageUrl("not a url")
