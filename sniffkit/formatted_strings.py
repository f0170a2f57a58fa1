"""Formatting helpers for numbers, addresses, paths and console output."""

from __future__ import annotations

import ipaddress
import math
import struct
from pathlib import Path

import platformdirs

from sniffkit.language import Language
from sniffkit.notification_texts import open_report_translation

APP_VERSION = "1.2.0"
"""Version of the application, shown to the user and used by the update check."""

_APP_NAME = "sniffkit"

_MULTIPLES = (
    (1_000_000_000_000, "T"),
    (1_000_000_000, "G"),
    (1_000_000, "M"),
    (1_000, "K"),
)


def _f32(value: float) -> float:
    """Round a number to single precision, saturating to infinity."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_one_decimal(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.1f}"


def get_percentage_string(observed: int, filtered: int) -> str:
    """Share of ``filtered`` over ``observed`` as a percentage with one decimal."""
    if observed < 0 or filtered < 0:
        raise ValueError("packet and byte counts cannot be negative")
    if observed == 0:
        value = math.nan if filtered == 0 else math.inf
    else:
        value = _f32(_f32(100.0 * _f32(filtered)) / _f32(observed))
    text = _format_one_decimal(value)
    if text == "0.0":
        return "<0.1%"
    return f"{text}%"


def get_formatted_bytes_string(num_bytes: int) -> str:
    """Quantity of bytes with its multiple (K, M, G, T)."""
    if num_bytes < 0:
        raise ValueError("a quantity of bytes cannot be negative")
    for threshold, letter in _MULTIPLES:
        if num_bytes >= threshold:
            n = _f32(_f32(num_bytes) / _f32(threshold))
            return f"{_format_one_decimal(n)} {letter}"
    return f"{num_bytes}  "


def get_report_path() -> Path:
    """Location of the text report written during a capture."""
    try:
        return platformdirs.user_config_path(_APP_NAME) / "report.txt"
    except Exception:  # noqa: BLE001 - any failure falls back to the home directory
        return Path.home() / f"{_APP_NAME}_report.txt"


def _center(text: str, width: int) -> str:
    padding = width - len(text)
    if padding <= 0:
        return text
    left = padding // 2
    return " " * left + text + " " * (padding - left)


def get_open_report_tooltip(language: Language) -> str:
    """Tooltip for the 'open report' button: its label centred above the report path."""
    report_path = str(get_report_path())
    width = len(report_path.encode("utf-8"))
    return f"{_center(open_report_translation(language), width)}\n{report_path}"


def _welcome_message() -> str:
    return rf"""
  /---------------------------------------------------------\
 |                                                           |
 |                   s n i f f k i t                         |
 |                                                           |
 |                   ___________                             |
 |                  /___________\                            |
 |                 | ___________ |                           |
 |                 | |         | |                           |
 |                 | | v{APP_VERSION}  | |                           |
 |                 | |_________| |________________________   |
 |                 \_____________/   network monitor      )  |
 |                 / ''''''''''' \                       /   |
 |                / ::::::::::::: \                  =D-'    |
 |               (_________________)                         |
  \_________________________________________________________/
    """


def print_cli_welcome_message() -> None:
    """Print the banner shown when the application starts."""
    print(_welcome_message(), end="")


def _is_ip_address(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def get_domain_from_r_dns(r_dns: str) -> str:
    """Last two labels of a reverse-DNS name; addresses and single labels unchanged."""
    if not r_dns or _is_ip_address(r_dns):
        return r_dns
    parts = r_dns.split(".")
    if len(parts) >= 2:
        return ".".join(parts[-2:])
    return r_dns


def get_socket_address(address: str, port: int) -> str:
    """Address and port joined, with brackets around IPv6 addresses."""
    if ":" in address:
        return f"[{address}]:{port}"
    return f"{address}:{port}"