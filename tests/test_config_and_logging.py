"""
Configuration, cookie formatting and log redaction tests.
"""

import logging

import pytest

from onboarding.core.config import Settings
from onboarding.core.logging import KeyValueFormatter
from onboarding.utils.cookies import session_cookie_header
from tests.helpers import SESSION_MS


@pytest.mark.unit
class TestSettings:
    def test_session_duration_is_thirty_days(self, settings):
        assert settings.session_duration_ms == SESSION_MS

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SESSION_COOKIE_NAME", "sid")
        monkeypatch.setenv("SESSION_DURATION_DAYS", "7")

        settings = Settings()

        assert settings.SESSION_COOKIE_NAME == "sid"
        assert settings.session_duration_ms == 7 * 24 * 60 * 60 * 1000


@pytest.mark.unit
class TestSessionCookieHeader:
    def test_refresh_cookie(self, settings):
        header = session_cookie_header(settings, "abc", "refresh", now_ms=0)

        assert header == (
            "__session=abc; Expires=Sat, 31 Jan 1970 00:00:00 GMT; "
            "HttpOnly; Path=/; SameSite=None; Secure; Partitioned"
        )

    def test_expired_cookie(self, settings):
        header = session_cookie_header(settings, "abc", "expired", now_ms=1_700_000_000_000)
        assert "Expires=Thu, 01 Jan 1970 00:00:00 GMT" in header


@pytest.mark.unit
class TestKeyValueFormatter:
    def _record(self, **extra):
        record = logging.makeLogRecord({"name": "onboarding.test", "levelname": "INFO", "msg": "hello"})
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_extras_appended(self):
        line = KeyValueFormatter("%(message)s").format(self._record(user_id="u1", role="Tenant"))
        assert line == "hello | role=Tenant user_id=u1"

    def test_sensitive_values_masked(self):
        line = KeyValueFormatter("%(message)s").format(self._record(password="hunter2", email="a@x.com"))

        assert "hunter2" not in line
        assert "password=***" in line
        assert "email=a@x.com" in line

    def test_plain_record(self):
        assert KeyValueFormatter("%(message)s").format(self._record()) == "hello"
