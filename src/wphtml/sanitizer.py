"""Normalization helpers shared by every builder.

All helpers return new containers; inputs are never mutated except by
`sanitize_input_type`, which works on a dict the caller already owns.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from wphtml.warning import warn

# Marks an attributes dict that already went through sanitize_html_attributes.
SANITIZED_KEY = "__sanitized"


def type_name(value: Any) -> str:
	return "None" if value is None else type(value).__name__


def to_string(value: Any) -> str:
	"""Coerce a scalar to a string, raising TypeError for anything else.

	None becomes "", booleans become "1" / "", integral floats lose their
	fractional part. Objects qualify through `__html__` or their own `__str__`.
	Binary data is rejected rather than rendered as its repr.
	"""
	if isinstance(value, str):
		return value
	if isinstance(value, (bytes, bytearray, memoryview)):
		raise TypeError(f"{type_name(value)} must be decoded before use")
	if value is None:
		return ""
	if isinstance(value, bool):
		return "1" if value else ""
	if isinstance(value, int):
		return str(value)
	if isinstance(value, float):
		if value.is_integer() and abs(value) < 1e15:
			return str(int(value))
		return repr(value)
	html = getattr(value, "__html__", None)
	if callable(html):
		return str(html())
	if type(value).__str__ is object.__str__:
		raise TypeError(f"{type_name(value)} has no string conversion")
	return str(value)


def to_string_or_default(
	value: Any,
	method: str,
	key: str,
	template: str,
	default: str | None = None,
) -> str | None:
	"""Convert `value` with `to_string`, warning and returning `default` on failure.

	`template` takes three %s placeholders: the key, the value's type name and
	the error message.
	"""
	if isinstance(value, str):
		return value
	try:
		return to_string(value)
	except Exception as exc:
		warn(method, template, key, type_name(value), str(exc))
	return default


def map_to_strings(
	values: Mapping[Any, Any],
	method: str,
	template: str,
	defaults: Mapping[Any, Any] | None = None,
) -> dict[Any, str | None]:
	defaults = defaults or {}
	return {
		key: to_string_or_default(value, method, str(key), template, defaults.get(key))
		for key, value in values.items()
	}


def remove_non_string_keys(
	mapping: Mapping[Any, Any],
	method: str | None = None,
	template: str | None = None,
) -> dict[str, Any]:
	if method is not None and template is None:
		template = 'Array key of type "%s" is not a string and will be skipped.'
	result: dict[str, Any] = {}
	for key, value in mapping.items():
		if isinstance(key, str):
			result[key] = value
		elif method is not None and template is not None:
			warn(method, template, type_name(key))
	return result


def remove_empty_string_keys(
	mapping: Mapping[Any, Any],
	method: str | None = None,
	template: str | None = None,
) -> dict[str, Any]:
	if method is not None and template is None:
		template = 'Array key is an empty string and will be skipped. Index: "%s".'
	result: dict[str, Any] = {}
	for index, (key, value) in enumerate(mapping.items()):
		if is_not_empty_string(key):
			result[key] = value
		elif method is not None and template is not None:
			warn(method, template, str(index))
	return result


def remove_none_values(mapping: Mapping[Any, Any] | None = None) -> dict[Any, Any]:
	return {key: value for key, value in (mapping or {}).items() if not_none(value)}


def not_none(value: Any) -> bool:
	return value is not None


def is_not_empty_string(value: Any) -> bool:
	return isinstance(value, str) and value != ""


def is_empty_or_not_string(value: Any) -> bool:
	return not is_not_empty_string(value)


def sanitize_html_attributes(
	attributes: Mapping[Any, Any] | None,
	method: str,
	defaults: Mapping[str, str] | None = None,
	add_sanitized: bool = True,
) -> dict[str, Any]:
	"""Normalize an attributes mapping to non-empty string keys and string values.

	Entries with non-string or empty keys are dropped with a warning, None
	values are dropped silently, values that cannot be converted are dropped
	with a warning unless `defaults` supplies a replacement. `True` becomes the
	attribute name (``checked="checked"``) and `False` removes the attribute.

	The result carries SANITIZED_KEY so that sanitizing it again is a no-op.
	"""
	if not attributes or attributes.get(SANITIZED_KEY):
		return dict(attributes or {})

	result = remove_non_string_keys(
		attributes,
		method,
		'Attribute key of type "%s" was found, but only string keys are allowed. Skipping this attribute.',
	)
	result = remove_empty_string_keys(
		result,
		method,
		"Attribute with an empty string key was found (index: %s). Skipping this attribute.",
	)
	result = remove_none_values(result)
	result = {
		key: key if value is True else value
		for key, value in result.items()
		if value is not False
	}
	result = map_to_strings(
		result,
		method,
		'Attribute "%s" has non-scalar value of type "%s", and could not be converted to string: %s. Skipping the attribute.',
		defaults,
	)
	result = remove_none_values(result)

	if add_sanitized:
		result[SANITIZED_KEY] = True
	return result


def sanitize_current_values(current: Any, method: str, template: str) -> list[str]:
	"""Normalize the current value(s) of a control to a list of unique strings.

	`template` takes three %s placeholders: the index, the type name and the
	error message. The result can contain empty strings.
	"""
	if current is None:
		return []
	values: Iterable[Any]
	if isinstance(current, Mapping):
		values = current.values()
	elif isinstance(current, (list, tuple, set, frozenset)):
		values = current
	else:
		values = [current]

	converted = map_to_strings(dict(enumerate(values)), method, template)
	unique: list[str] = []
	for value in converted.values():
		if value is not None and value not in unique:
			unique.append(value)
	return unique


def sanitize_input_type(attributes: dict[str, Any], method: str) -> str:
	"""Ensure attributes["type"] is a lower-case, non-empty string and return it."""
	input_type = attributes.get("type")
	if is_empty_or_not_string(input_type) or not input_type.strip():
		warn(
			method,
			'HTML <input> attribute "type" is missing or empty, defaulting to "text".',
		)
		input_type = "text"
	attributes["type"] = input_type.strip().lower()
	return attributes["type"]


__all__ = [
	"SANITIZED_KEY",
	"is_empty_or_not_string",
	"is_not_empty_string",
	"map_to_strings",
	"not_none",
	"remove_empty_string_keys",
	"remove_non_string_keys",
	"remove_none_values",
	"sanitize_current_values",
	"sanitize_html_attributes",
	"sanitize_input_type",
	"to_string",
	"to_string_or_default",
	"type_name",
]
