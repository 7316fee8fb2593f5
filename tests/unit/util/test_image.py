"""Unit tests for data URL image helpers."""

import pytest

from storefront.util.image import InvalidImageError, decode_data_url, encode_data_url
from tests.harness import PNG_DATA_URL


class TestDecodeDataURL:
    def test_decodes_png(self):
        # Act
        data, content_type = decode_data_url(PNG_DATA_URL)

        # Assert
        assert content_type == "image/png"
        assert data.startswith(b"\x89PNG")

    def test_missing_mime_defaults_to_jpeg(self):
        data, content_type = decode_data_url("data:;base64,aGVsbG8=")

        assert data == b"hello"
        assert content_type == "image/jpeg"

    @pytest.mark.parametrize(
        "value",
        [
            "hello",
            "https://example.com/shoe.png",
            "data:image/png,not-base64",
            "data:image/png;base64,@@@@",
            "data:image/png;base64,",
        ],
    )
    def test_rejects_non_data_urls(self, value):
        with pytest.raises(InvalidImageError, match="Invalid image format"):
            decode_data_url(value)

    def test_encode_restores_data_url(self):
        data, content_type = decode_data_url(PNG_DATA_URL)

        assert encode_data_url(data, content_type) == PNG_DATA_URL
