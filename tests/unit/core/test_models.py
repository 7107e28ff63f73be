"""
Tests for immutable request/response values.
"""

import dataclasses

import pytest

from api_manager.core.models import HTTPResponseEnvelope, MultipartSpec, RequestSpec


class TestRequestSpec:
    def test_defaults(self):
        spec = RequestSpec(url="https://x.io")
        assert spec.method == "GET"
        assert dict(spec.headers) == {}
        assert spec.body is None

    def test_frozen(self):
        spec = RequestSpec(url="https://x.io")
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.url = "https://y.io"

    def test_headers_copied_and_read_only(self):
        headers = {"A": "1"}
        spec = RequestSpec(url="https://x.io", headers=headers)
        headers["B"] = "2"

        assert dict(spec.headers) == {"A": "1"}
        with pytest.raises(TypeError):
            spec.headers["C"] = "3"


class TestMultipartSpec:
    def test_defaults_match_image_upload(self):
        spec = MultipartSpec(url="https://x.io", payload=b"x")
        assert spec.method == "POST"
        assert spec.field_name == "image"
        assert spec.file_name == "image.jpg"
        assert spec.mime_type == "image/jpeg"
        assert spec.fields == ()

    def test_fields_from_mapping_keep_order(self):
        spec = MultipartSpec(url="https://x.io", fields={"b": "1", "a": "2"}, payload=b"")
        assert spec.fields == (("b", "1"), ("a", "2"))

    def test_fields_from_pairs(self):
        spec = MultipartSpec(url="https://x.io", fields=[("k", "v"), ("k", "w")], payload=b"")
        assert spec.fields == (("k", "v"), ("k", "w"))

    def test_bytearray_payload_frozen_to_bytes(self):
        spec = MultipartSpec(url="https://x.io", payload=bytearray(b"ab"))
        assert spec.payload == b"ab"
        assert isinstance(spec.payload, bytes)

    def test_non_bytes_payload_rejected(self):
        with pytest.raises(TypeError):
            MultipartSpec(url="https://x.io", payload="text")


class TestHTTPResponseEnvelope:
    def test_text_replaces_invalid_utf8(self):
        envelope = HTTPResponseEnvelope(200, b"ok \xff")
        assert envelope.text == "ok \ufffd"
