"""Value conversion helpers for configuration data."""

from __future__ import annotations

import ipaddress
import string
from collections.abc import Iterable

_FALSE_VALUES = frozenset({"0", "false", "-", "off"})
_TRUE_VALUES = frozenset({"1", "true", "+", "on"})
_DIGITS = string.digits + string.ascii_lowercase


def is_false_value(value: str | None) -> bool:
    """Return True for None, "0", "false", "-" or "off"."""
    return value is None or value in _FALSE_VALUES


def is_true_value(value: str | None, explicit: bool = False) -> bool:
    """Return True if ``value`` represents a true state.

    Without ``explicit`` anything that is not a false value counts as true;
    with it only "1", "true", "+" or "on" do.
    """
    if not explicit:
        return not is_false_value(value)
    return value is not None and value in _TRUE_VALUES


def _leading_number(text: str, base: int) -> int:
    """Parse the leading integer of ``text`` the way strtol does; 0 if none."""
    rest = text.lstrip()
    sign = 1
    if rest.startswith(("+", "-")):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    lowered = rest.lower()
    if base == 0:
        if lowered.startswith("0x") and len(lowered) > 2 and lowered[2] in string.hexdigits:
            base, lowered = 16, lowered[2:]
        elif lowered.startswith("0"):
            base = 8
        else:
            base = 10
    elif base == 16 and lowered.startswith("0x") and len(lowered) > 2 and lowered[2] in string.hexdigits:
        lowered = lowered[2:]
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base: {base}")
    value = 0
    for char in lowered:
        digit = _DIGITS.find(char)
        if digit < 0 or digit >= base:
            break
        value = value * base + digit
    return sign * value


def to_int(value: str | None) -> int:
    """Return the leading decimal integer of ``value``, or 0 if there is none."""
    if not value:
        return 0
    return _leading_number(value, 10)


def parse_bytes(text: str | None, sep: str = ".", max_bytes: int = 4, base: int = 10) -> bytes:
    """Split ``text`` at ``sep`` and convert each part to a byte.

    The result always has ``max_bytes`` bytes; missing parts become 0.
    """
    result: list[int] = []
    rest = text or ""
    while len(result) < max_bytes:
        if not rest:
            result.append(0)
            continue
        result.append(_leading_number(rest, base) & 0xFF)
        _, found, rest = rest.partition(sep)
        if not found:
            break
    result.extend([0] * (max_bytes - len(result)))
    return bytes(result)


def _as_text(value: object) -> str:
    """Render a JSON value as text: null is empty, booleans are lower case."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def store_int(value: object, current: int, default: int | None = None) -> int:
    """Return ``value`` as an int, else ``default``, else ``current``."""
    text = _as_text(value)
    if text:
        return to_int(text)
    if default is not None:
        return default
    return current


def store_float(value: object, current: float, default: float | None = None) -> float:
    """Return the whole-number part of ``value`` as a float, else ``default``, else ``current``."""
    text = _as_text(value)
    if text:
        return float(to_int(text))
    if default is not None:
        return default
    return current


def store_bool(value: object, current: bool, default: bool | None = None) -> bool:
    """Return ``value`` read as a boolean, else ``default``, else ``current``."""
    text = _as_text(value)
    if text:
        return is_true_value(text)
    if default is not None:
        return default
    return current


def store_str(value: str | None, current: str, default: str | None = None) -> str:
    """Return ``value`` if it is not empty.

    An empty value with a non-empty ``default`` clears the target; otherwise
    ``current`` is kept.
    """
    if value:
        return value
    if default:
        return ""
    return current


def format_ip(address: ipaddress.IPv4Address | Iterable[int]) -> str:
    """Format an IPv4 address as dotted decimal text."""
    if isinstance(address, ipaddress.IPv4Address):
        return str(address)
    octets = list(address)
    if len(octets) != 4:
        raise ValueError("an IPv4 address has four octets")
    return ".".join(str(octet) for octet in octets)