"""Unit tests for post payload validation."""

import pytest

from blog.application.validation import (
    CreatePostPayload,
    UpdatePostPayload,
    validate_payload,
)

VALID = {"title": "Hello", "body": "World", "tags": ["a", "b"]}


def error_fields(result) -> set[str]:
    return {error.field for error in result.errors}


class TestCreatePayload:
    """Validation against CreatePostPayload."""

    def test_valid_payload(self):
        result = validate_payload(CreatePostPayload, VALID)

        assert result.ok
        assert result.values == VALID

    def test_empty_tag_list_is_allowed(self):
        result = validate_payload(CreatePostPayload, {**VALID, "tags": []})

        assert result.ok
        assert result.values["tags"] == []

    @pytest.mark.parametrize("missing", ["title", "body", "tags"])
    def test_each_field_is_required(self, missing):
        payload = {k: v for k, v in VALID.items() if k != missing}

        result = validate_payload(CreatePostPayload, payload)

        assert not result.ok
        assert error_fields(result) == {missing}

    @pytest.mark.parametrize(
        "field,value",
        [
            ("title", 123),
            ("title", ""),
            ("body", True),
            ("body", None),
            ("tags", "a,b"),
            ("tags", None),
        ],
    )
    def test_wrong_types_are_rejected(self, field, value):
        result = validate_payload(CreatePostPayload, {**VALID, field: value})

        assert not result.ok
        assert field in {e.field.split(".")[0] for e in result.errors}

    def test_tag_elements_must_be_strings(self):
        result = validate_payload(CreatePostPayload, {**VALID, "tags": ["ok", 5]})

        assert error_fields(result) == {"tags.1"}

    def test_server_owned_keys_are_dropped(self):
        payload = {**VALID, "user": {"id": "evil", "username": "evil"}, "id": 7}

        result = validate_payload(CreatePostPayload, payload)

        assert result.ok
        assert "user" not in result.values
        assert "id" not in result.values

    @pytest.mark.parametrize("payload", [None, [], "text"])
    def test_non_object_payload_is_rejected(self, payload):
        result = validate_payload(CreatePostPayload, payload)

        assert not result.ok


class TestUpdatePayload:
    """Validation against UpdatePostPayload."""

    def test_empty_payload_is_valid_and_changes_nothing(self):
        result = validate_payload(UpdatePostPayload, {})

        assert result.ok
        assert result.values == {}

    def test_missing_body_counts_as_empty(self):
        result = validate_payload(UpdatePostPayload, None)

        assert result.ok
        assert result.values == {}

    def test_only_supplied_fields_are_returned(self):
        result = validate_payload(UpdatePostPayload, {"title": "New"})

        assert result.values == {"title": "New"}

    @pytest.mark.parametrize("field", ["title", "body", "tags"])
    def test_null_is_rejected(self, field):
        result = validate_payload(UpdatePostPayload, {field: None})

        assert not result.ok
        assert error_fields(result) == {field}

    def test_wrong_type_is_rejected(self):
        result = validate_payload(UpdatePostPayload, {"tags": [1]})

        assert error_fields(result) == {"tags.0"}

    def test_user_cannot_be_patched(self):
        result = validate_payload(UpdatePostPayload, {"user": {"id": "evil"}})

        assert result.ok
        assert result.values == {}
