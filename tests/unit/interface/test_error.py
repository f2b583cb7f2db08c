"""Tests for domain and adapter error to HTTP error mapping."""

import pytest

from foro.adapter.error import StorageError
from foro.domain.error import (
    DomainError,
    InvalidStateError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from foro.interface.error import to_http_exception


class TestToHttpException:
    @pytest.mark.parametrize(
        "error,status_code",
        [
            (ValidationError("Title is required", field="title"), 400),
            (InvalidStateError("Post", "1", "deleted"), 400),
            (NotFoundError("Post", "1"), 404),
            (PersistenceError("find", ConnectionError("refused")), 503),
            (StorageError("disk full"), 503),
            (DomainError("boom"), 500),
        ],
    )
    def test_status_codes(self, error, status_code):
        assert to_http_exception(error, "get post").status_code == status_code

    def test_validation_detail_names_field(self):
        error = ValidationError("Invalid email", field="authors.0.email")

        exc = to_http_exception(error, "create post")

        assert exc.detail == {"message": "Invalid email", "field": "authors.0.email"}

    def test_persistence_detail_hides_cause(self):
        error = PersistenceError("save", RuntimeError("password=hunter2"))

        exc = to_http_exception(error, "create post")

        assert "hunter2" not in str(exc.detail)

    def test_storage_detail_hides_cause(self):
        exc = to_http_exception(StorageError("/srv/uploads is read-only"), "upload images")

        assert exc.detail == {"message": "Image storage is unavailable"}
