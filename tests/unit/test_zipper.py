"""
Compression Unit Tests
Tests for stumbler/compression/zipper.py
"""
import gzip
import logging

from stumbler.compression import unzip_data, zip_data


class TestZipData:
    """Tests for zip_data()."""

    def test_output_is_gzip(self):
        data = b'{"items": [1, 2, 3]}'

        compressed = zip_data(data)

        assert compressed[:2] == b"\x1f\x8b"
        assert gzip.decompress(compressed) == data

    def test_empty_input(self):
        assert gzip.decompress(zip_data(b"")) == b""

    def test_failure_returns_none(self, caplog):
        with caplog.at_level(logging.ERROR, logger="stumbler.compression.zipper"):
            assert zip_data("not bytes") is None

        assert "Couldn't compress data" in caplog.text


class TestUnzipData:
    """Tests for unzip_data()."""

    def test_returns_text(self):
        assert unzip_data(gzip.compress("héllo".encode("utf-8"))) == "héllo"

    def test_inverse_of_zip_data(self):
        assert unzip_data(zip_data(b'{"a": 1}')) == '{"a": 1}'

    def test_invalid_gzip_returns_none(self):
        assert unzip_data(b"definitely not gzip") is None

    def test_truncated_gzip_returns_none(self):
        assert unzip_data(gzip.compress(b"some payload")[:-6]) is None
