"""Form controls: single elements with value handling and usage checks."""

from collections.abc import Iterable, Mapping
from typing import Any

from markupsafe import Markup

from wphtml import html
from wphtml.sanitizer import (
	is_empty_or_not_string,
	is_not_empty_string,
	sanitize_current_values,
	sanitize_html_attributes,
	sanitize_input_type,
	to_string_or_default,
	type_name,
)
from wphtml.tag import Attributes
from wphtml.warning import warn

_TEXTAREA = f"{__name__}.textarea"
_INPUT = f"{__name__}.input"
_OPTION = f"{__name__}.option"
_SELECT = f"{__name__}.select"

_CONTENT_OR_NONE = 'Content for HTML tag <%s> of type "%s" could not be converted to string: %s. Using None as default.'

# Input types where an empty value="" is redundant or ignored. Hidden,
# checkbox, radio, button-like and image inputs keep it.
DROP_EMPTY_VALUE_TYPES = frozenset(
	{
		"text",
		"email",
		"password",
		"search",
		"url",
		"tel",
		"number",
		"range",
		"date",
		"time",
		"datetime-local",
		"month",
		"week",
		"color",
	}
)

Options = Mapping[Any, Any] | Iterable[Any]


def checked_explicitly(attributes: Attributes | None) -> bool:
	"""Whether the caller set `checked` themselves, including to False."""
	return attributes is not None and attributes.get("checked") is not None


def textarea(attributes: Attributes | None = None, current: Any = None) -> Markup:
	"""Generate a `<textarea>` control.

	A `value` attribute is not valid on `<textarea>` and is removed with a
	warning. When `current` is None and `value` is non-empty, the value is used
	as the content instead.
	"""
	attrs = sanitize_html_attributes(attributes, _TEXTAREA)

	if "value" in attrs:
		if current is None and is_not_empty_string(attrs["value"]):
			warn(
				_TEXTAREA,
				'HTML tag <textarea> has a "value" attribute but no content. Replacing content with the "value" attribute content.',
			)
			current = attrs["value"]
		else:
			warn(
				_TEXTAREA,
				'HTML tag <textarea> does not support a "value" attribute. Removing "value" attribute.',
			)
		del attrs["value"]

	content = to_string_or_default(current, _TEXTAREA, "textarea", _CONTENT_OR_NONE)
	return html.textarea(content, attrs)


def input(attributes: Attributes | None = None, current: Any = None) -> Markup:
	"""Generate an `<input />` control.

	Defaults and validation:
	- A missing or empty `type` defaults to "text" with a warning.
	- `current` (a value or a collection of values) fills in an empty `value`
	  and drives `checked` for checkboxes and radios unless `checked` is given.

	Type-specific notes:
	- checkbox / radio: warns when `value` is omitted (browsers submit "on").
	- submit / button / reset: warns when `value` is missing or empty.
	- file: a preset `value` is removed with a warning.
	- password: a preset `value` is kept, with a warning.

	Finally `value=""` is dropped for types where it is redundant.
	"""
	# checked=False is dropped by sanitizing but still overrides `current`
	checked_given = checked_explicitly(attributes)
	attrs = sanitize_html_attributes(attributes, _INPUT)
	input_type = sanitize_input_type(attrs, _INPUT)

	values = [
		value
		for value in sanitize_current_values(
			current,
			_INPUT,
			'Current <input> value (index: "%s") of type "%s" could not be converted to string: %s. Skipping this value.',
		)
		if is_not_empty_string(value)
	]
	has_current = len(values) > 0

	has_value = "value" in attrs
	value = attrs.get("value")
	value_is_empty = is_empty_or_not_string(value)

	if input_type in ("checkbox", "radio"):
		if not has_value:
			warn(
				_INPUT,
				'HTML <input> type "%s" missing "value" attribute. If omitted, browsers submit "on" when checked. Provide "value" attribute explicitly if you need a different submitted value.',
				input_type,
			)
		if has_current and not checked_given and "checked" not in attrs:
			submitted = str(value) if has_value else "on"
			if submitted in values:
				attrs["checked"] = "checked"

	elif input_type in ("submit", "button", "reset"):
		if not has_value:
			warn(
				_INPUT,
				'HTML <input> type "%s" missing "value" attribute. Consider providing it to define the button label/value explicitly.',
				input_type,
			)
		elif value_is_empty:
			warn(
				_INPUT,
				'HTML <input> type "%s" has empty "value" attribute. Consider providing a non-empty "value" attribute to define the button label/value explicitly.',
				input_type,
			)
		if value_is_empty and has_current:
			attrs["value"] = values[0]

	elif input_type == "file":
		if has_value:
			warn(
				_INPUT,
				'Input type "file" cannot have a preset value; browsers ignore it for security reasons. Removing "value" attribute.',
			)
			del attrs["value"]

	elif input_type == "password":
		if has_value:
			warn(
				_INPUT,
				'Setting a preset value for input type "password" is not recommended for security reasons. Try to avoid it if possible.',
			)

	else:
		if value_is_empty and has_current:
			attrs["value"] = values[0]

	if (
		"value" in attrs
		and is_empty_or_not_string(attrs["value"])
		and input_type in DROP_EMPTY_VALUE_TYPES
	):
		warn(
			_INPUT,
			'HTML <input> type "%s" has an empty "value" attribute which is redundant/ignored here. Removing "value" attribute.',
			input_type,
		)
		del attrs["value"]

	return html.input(attrs)


def option(content: Any = None, attributes: Attributes | None = None) -> Markup:
	"""Generate an `<option>` for a `<select>`.

	Warns when `value` is missing (the submitted value would fall back to the
	option text) and when neither content nor a `label` attribute is given.
	"""
	attrs = sanitize_html_attributes(attributes, _OPTION)
	text = to_string_or_default(
		content,
		_OPTION,
		"option",
		'Content for HTML tag <%s> of type "%s" could not be converted to string: %s. Using empty string as default.',
		"",
	)

	if "value" not in attrs:
		warn(
			_OPTION,
			'HTML tag <option> missing "value" attribute. The submitted value will default to the option text, which is fragile and locale-dependent.',
		)

	if is_empty_or_not_string(text) and is_empty_or_not_string(attrs.get("label")):
		warn(
			_OPTION,
			'HTML tag <option> requires either non-empty text content or a "label" attribute.',
		)

	return html.option(text, attrs)


def _iter_options(options: Options | None) -> Iterable[tuple[Any, Any]]:
	if options is None:
		return
	if isinstance(options, Mapping):
		yield from options.items()
		return
	for index, item in enumerate(options):
		if isinstance(item, (tuple, list)):
			if len(item) == 2:
				yield item[0], item[1]
				continue
		elif not isinstance(item, Mapping):
			# A bare value is its own label
			yield item, item
			continue
		warn(
			_SELECT,
			'Option at index "%s" of type "%s" is neither a value nor a (value, label) pair. Skipping this option.',
			str(index),
			type_name(item),
		)


def _render_options(options: Options | None, selected: list[str]) -> str:
	parts: list[str] = []
	for value, label in _iter_options(options):
		if isinstance(label, Mapping):
			parts.append(
				html.optgroup(_render_options(label, selected), {"label": value})
			)
			continue
		key = to_string_or_default(
			value,
			_SELECT,
			"option",
			'Value for HTML tag <%s> of type "%s" could not be converted to string: %s. Skipping this option.',
		)
		if key is None:
			continue
		attrs: dict[str, Any] = {"value": key}
		if key in selected:
			attrs["selected"] = "selected"
		parts.append(option(label, sanitize_html_attributes(attrs, _SELECT)))
	return "".join(parts)


def select(
	attributes: Attributes | None = None,
	options: Options | None = None,
	current: Any = None,
) -> Markup:
	"""Generate a `<select>` control with its options.

	`options` maps option values to labels, or is an iterable of
	`(value, label)` pairs and bare values, which serve as their own label.
	A label that is itself a mapping renders an `<optgroup>` labelled by its
	key. Options whose value is among `current` are marked `selected`. Without
	a `multiple` attribute only the first current value is used, with a warning
	when more were given.
	"""
	attrs = sanitize_html_attributes(attributes, _SELECT)
	values = sanitize_current_values(
		current,
		_SELECT,
		'Current <select> value (index: "%s") of type "%s" could not be converted to string: %s. Skipping this value.',
	)
	if len(values) > 1 and "multiple" not in attrs:
		warn(
			_SELECT,
			'HTML <select> received %s current values but has no "multiple" attribute. Only the first value will be selected.',
			str(len(values)),
		)
		values = values[:1]

	return html.select(Markup(_render_options(options, values)), attrs)


__all__ = ["DROP_EMPTY_VALUE_TYPES", "Options", "input", "option", "select", "textarea"]
