from unittest import mock

import pytest
import requests

from sniffkit.check_updates import (
    LATEST_RELEASE_URL,
    UpdateCheckError,
    is_newer_release_available,
    is_newer_version,
    newer_release_status,
)


class _Response:
    def __init__(self, body):
        self._body = body

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class _Session:
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def get(self, url, headers=None):
        self.calls.append((url, headers))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_newer_version_detected():
    assert is_newer_version("v9.9.9", "1.2.0") is True


def test_older_or_equal_version_not_newer():
    assert is_newer_version("v0.0.1", "1.2.0") is False
    assert is_newer_version("v1.2.0", "1.2.0") is False


def test_release_name_is_trimmed():
    assert is_newer_version("  v9.0.0\n", "1.2.0") is True


@pytest.mark.parametrize("name", [":-(", "1.2.3", "v1.2", "v10.2.3", "vA.2.3", "v1-2-3", ""])
def test_unparseable_names_raise(name):
    with pytest.raises(UpdateCheckError, match="Cannot parse latest version name"):
        is_newer_version(name, "1.2.0")


def test_fetch_latest_release():
    session = _Session([_Response({"name": "v9.9.9"})])
    assert is_newer_release_available(6, 2, session) is True
    assert session.calls[0][0] == LATEST_RELEASE_URL


def test_retries_after_connection_errors():
    session = _Session(
        [
            requests.ConnectionError("down"),
            requests.ConnectionError("down"),
            _Response({"name": "v0.0.1"}),
        ]
    )
    assert is_newer_release_available(6, 0, session) is False
    assert len(session.calls) == 3


def test_gives_up_after_max_retries():
    session = _Session([requests.ConnectionError("unreachable")] * 3)
    with pytest.raises(UpdateCheckError, match="unreachable"):
        is_newer_release_available(3, 0, session)
    assert len(session.calls) == 3


def test_unreadable_body_is_a_parse_error():
    session = _Session([_Response(ValueError("not json"))])
    with pytest.raises(UpdateCheckError, match=":-\\("):
        is_newer_release_available(1, 0, session)


def test_body_without_name_is_a_parse_error():
    session = _Session([_Response({"tag": "v9.9.9"})])
    with pytest.raises(UpdateCheckError):
        is_newer_release_available(1, 0, session)


def test_zero_retries_rejected():
    with pytest.raises(ValueError):
        is_newer_release_available(0, 0, _Session([]))


def test_status_holds_result():
    session = _Session([_Response({"name": "v9.9.9"})])
    with mock.patch("requests.Session", return_value=session):
        assert newer_release_status() is True


def test_status_holds_error():
    session = _Session([_Response({"name": "latest"})])
    with mock.patch("requests.Session", return_value=session):
        status = newer_release_status()
    assert isinstance(status, UpdateCheckError)
    assert "latest" in str(status)