from collections.abc import Mapping
from typing import Any

from wphtml.escaping import esc_attr
from wphtml.sanitizer import SANITIZED_KEY, to_string, type_name
from wphtml.warning import warn

_SCALARS = (str, int, float, bool)


def render_attributes(attributes: Mapping[str, Any]) -> str:
	"""Serialize attributes as ` key="value"` pairs, escaping keys and values.

	None values and the sanitized marker are skipped. Non-scalar values are
	skipped with a warning.
	"""
	out: list[str] = []
	for key, value in attributes.items():
		if value is None or key == SANITIZED_KEY:
			continue
		if not isinstance(value, _SCALARS):
			warn(
				f"{__name__}.render_attributes",
				'Attribute "%s" has non-scalar value of type "%s", skipping.',
				str(key),
				type_name(value),
			)
			continue
		out.append(f' {esc_attr(key)}="{esc_attr(to_string(value))}"')
	return "".join(out)


__all__ = ["render_attributes"]
