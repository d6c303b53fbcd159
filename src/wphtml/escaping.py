"""WordPress-style escaping helpers on top of markupsafe."""

import re
from collections.abc import Mapping
from typing import Any

from markupsafe import escape

# Named, decimal and hex character references that are already encoded.
_ENTITY_RE = re.compile(r"&(?:[A-Za-z][A-Za-z0-9]{1,31}|#[0-9]{1,7}|#[xX][0-9A-Fa-f]{1,6});")
_OCTET_RE = re.compile(r"%[a-fA-F0-9][a-fA-F0-9]")
_CLASS_INVALID_RE = re.compile(r"[^A-Za-z0-9_-]")


def _plain(text: Any) -> str:
	if text is None:
		return ""
	# str() drops any Markup subclass so its content gets escaped too
	return str(text)


def _escape_once(text: Any) -> str:
	value = _plain(text)
	if not value:
		return ""
	out: list[str] = []
	pos = 0
	for match in _ENTITY_RE.finditer(value):
		out.append(str(escape(value[pos : match.start()])))
		out.append(match.group(0))
		pos = match.end()
	out.append(str(escape(value[pos:])))
	return "".join(out)


def esc_html(text: Any) -> str:
	"""Escape text for use in an HTML body without double-encoding entities."""
	return _escape_once(text)


def esc_attr(text: Any) -> str:
	"""Escape text for use in an HTML attribute value."""
	return _escape_once(text)


def esc_textarea(text: Any) -> str:
	"""Escape text for a <textarea> body. Existing entities are encoded again."""
	return str(escape(_plain(text)))


def sanitize_html_class(value: Any, fallback: str = "") -> str:
	"""Reduce `value` to a safe class name: only A-Z, a-z, 0-9, _ and -.

	Percent-encoded octets are removed first. When nothing is left the
	sanitized `fallback` is returned.
	"""
	sanitized = _CLASS_INVALID_RE.sub("", _OCTET_RE.sub("", _plain(value)))
	if sanitized == "" and fallback:
		return sanitize_html_class(fallback)
	return sanitized


def parse_args(
	args: Mapping[Any, Any] | None, defaults: Mapping[Any, Any] | None = None
) -> dict[Any, Any]:
	"""Merge `args` over `defaults`, keeping the defaults' key order first."""
	return {**(defaults or {}), **(args or {})}


__all__ = [
	"esc_attr",
	"esc_html",
	"esc_textarea",
	"parse_args",
	"sanitize_html_class",
]
