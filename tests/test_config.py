"""
Tests for Settings validation and the error taxonomy mapping.
"""

import pytest
from pydantic import ValidationError as SettingsValidationError

from books_service.config import Settings
from books_service.errors import (
    AuthError,
    CatalogImportError,
    NotFoundError,
    PayloadTooLargeError,
    StoreError,
    ValidationError,
    status_for,
)
from tests.conftest import TEST_TOKEN


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(api_token=TEST_TOKEN)

        assert settings.database_url.startswith("postgresql+psycopg2://")
        assert settings.page_size == 10
        assert settings.max_body_size == 4096
        assert settings.google_books_url == "https://www.googleapis.com/books/v1/volumes"

    def test_log_level_normalized(self):
        assert Settings(api_token=TEST_TOKEN, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(SettingsValidationError):
            Settings(api_token=TEST_TOKEN, log_level="chatty")

    def test_invalid_environment(self):
        with pytest.raises(SettingsValidationError):
            Settings(api_token=TEST_TOKEN, environment="qa")

    @pytest.mark.parametrize(
        "token",
        ["short", "REPLACE_WITH_A_REAL_TOKEN", "please-change-me-before-deploying"],
    )
    def test_weak_token_rejected(self, token):
        with pytest.raises(SettingsValidationError):
            Settings(api_token=token)

    def test_token_required_when_auth_enabled(self):
        with pytest.raises(SettingsValidationError, match="API_TOKEN"):
            Settings(auth_enabled=True, api_token=None)

    def test_token_optional_when_auth_disabled(self):
        settings = Settings(auth_enabled=False, api_token=None)

        assert settings.api_token is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PAGE_SIZE", "25")

        assert Settings(api_token=TEST_TOKEN).page_size == 25


@pytest.mark.parametrize(
    "exc,expected",
    [
        (ValidationError(), 400),
        (AuthError(), 401),
        (NotFoundError(), 404),
        (PayloadTooLargeError(), 413),
        (StoreError(), 500),
        (CatalogImportError(), 502),
        (RuntimeError("boom"), 500),
    ],
)
def test_status_for(exc, expected):
    assert status_for(exc) == expected
