"""Checks whether a newer release of the application has been published."""

from __future__ import annotations

import time

import requests

from sniffkit.formatted_strings import APP_VERSION

LATEST_RELEASE_URL = "https://example.com/sniffkit/releases/latest"

_HEADERS = {
    "User-agent": "sniffkit",
    "Accept": "application/json",
}

_UNREADABLE_NAME = ":-("


class UpdateCheckError(Exception):
    """The latest release could not be fetched or its name could not be read."""


def _is_release_name(name: str) -> bool:
    raw = name.encode("utf-8")
    if len(raw) != 6:
        return False
    digits = b"0123456789"
    return (
        raw[0:1] == b"v"
        and raw[1] in digits
        and raw[2:3] == b"."
        and raw[3] in digits
        and raw[4:5] == b"."
        and raw[5] in digits
    )


def is_newer_version(release_name: str, current_version: str = APP_VERSION) -> bool:
    """Tell whether a release name such as ``v1.1.2`` is newer than ``current_version``."""
    name = release_name.strip()
    if not _is_release_name(name):
        raise UpdateCheckError(f"Cannot parse latest version name {name}")
    return name[1:] > current_version


def _release_name(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return _UNREADABLE_NAME
    if isinstance(body, dict) and isinstance(body.get("name"), str):
        return body["name"]
    return _UNREADABLE_NAME


def is_newer_release_available(
    max_retries: int = 6,
    seconds_between_retries: float = 30,
    session: requests.Session | None = None,
) -> bool:
    """Fetch the latest release, retrying on connection errors, and compare it."""
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")
    http = session if session is not None else requests.Session()
    last_error: requests.RequestException | None = None
    for attempt in range(max_retries):
        try:
            response = http.get(LATEST_RELEASE_URL, headers=_HEADERS)
        except requests.RequestException as exc:
            last_error = exc
            if attempt < max_retries - 1:
                time.sleep(seconds_between_retries)
            continue
        return is_newer_version(_release_name(response))
    raise UpdateCheckError(str(last_error)) from last_error


def newer_release_status() -> bool | UpdateCheckError:
    """Outcome of the update check as a value to keep: a bool, or the error met."""
    try:
        return is_newer_release_available(6, 30)
    except UpdateCheckError as exc:
        return exc