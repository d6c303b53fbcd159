"""Composite form fields: label, control and description in a wrapper div.

Every field derives its element ids from one base: the control's `id` when
given, otherwise its `name` normalized to `[A-Za-z0-9_]`. With a base of
`email` the field renders::

	<div id="email_field" class="form_field form_field__type_email">
		<label id="email_label" for="email_control" class="form_field__label">...</label>
		<input id="email_control" class="form_field__control ..." aria-labelledby="email_label" ... />
		<p id="email_description" class="description form_field__description">...</p>
	</div>

(without the whitespace). Label and description are inserted as markup, so
they may contain inline HTML but must not contain untrusted text.
"""

import re
from collections.abc import Callable
from typing import Any

from markupsafe import Markup

from wphtml import html
from wphtml.escaping import parse_args, sanitize_html_class
from wphtml.form import control
from wphtml.form.control import Options
from wphtml.sanitizer import (
	is_empty_or_not_string,
	is_not_empty_string,
	sanitize_html_attributes,
	sanitize_input_type,
)
from wphtml.tag import Attributes
from wphtml.warning import warn

_INVALID_ID_CHARS = re.compile(r"[^a-z0-9_]", re.IGNORECASE)
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")

# Controls rendered before their label
_LABEL_AFTER_TYPES = ("checkbox", "radio")


def id_base_from_name(name: Any) -> str | None:
	"""Turn a control name such as `options[site name]` into `options_site_name`."""
	if not is_not_empty_string(name):
		return None
	normalized = _INVALID_ID_CHARS.sub("_", name.strip())
	return _REPEATED_UNDERSCORES.sub("_", normalized).strip("_") or None


def _field(
	method: str,
	control_type: str,
	attrs: dict[str, Any],
	render_control: Callable[[dict[str, Any]], Markup],
	label: Any,
	description: Any,
	wrapper_attributes: Attributes | None,
) -> Markup:
	type_base = sanitize_html_class(control_type, "text")

	control_id = attrs.get("id")
	id_base = control_id.strip() if is_not_empty_string(control_id) else None
	if not id_base:
		id_base = id_base_from_name(attrs.get("name"))

	attrs = parse_args(
		attrs,
		{
			"id": f"{id_base}_control" if id_base else None,
			"class": f"form_field__control form_field__control_type_{type_base}",
		},
	)

	if is_empty_or_not_string(label):
		warn(
			method,
			"Form field is missing a label, which is important for accessibility. If intentional, please ensure proper ARIA attributes are used or consider using the control builders directly.",
		)
		label_html = ""
	else:
		label_id = f"{id_base}_label" if id_base else None
		label_html = html.label(
			label,
			{"id": label_id, "for": attrs.get("id"), "class": "form_field__label"},
		)
		if label_id is not None and is_empty_or_not_string(attrs.get("aria-labelledby")):
			attrs["aria-labelledby"] = label_id

	description_html = ""
	description = description.strip() if is_not_empty_string(description) else ""
	if description:
		description_id = f"{id_base}_description" if id_base else None
		# Text or inline markup only: the description sits inside a <p>
		description_html = html.p(
			description,
			{"id": description_id, "class": "description form_field__description"},
		)
		if description_id is not None and is_empty_or_not_string(
			attrs.get("aria-describedby")
		):
			attrs["aria-describedby"] = description_id

	rendered = render_control(attrs)
	if control_type in _LABEL_AFTER_TYPES:
		body = f"{rendered} {label_html}"
	else:
		body = f"{label_html}{rendered}"

	return html.div(
		Markup(f"{body.strip()}\n{description_html}".strip()),
		parse_args(
			wrapper_attributes,
			{
				"id": f"{id_base}_field" if id_base else None,
				"class": f"form_field form_field__type_{sanitize_html_class(control_type)}",
			},
		),
	)


def input(
	attributes: Attributes | None,
	current: Any = None,
	label: Any = None,
	description: Any = None,
	wrapper_attributes: Attributes | None = None,
) -> Markup:
	"""Generate a complete field around an `<input />` control.

	Args:
		attributes: Attributes for the input element.
		current: Current value(s) for the input, see `control.input`.
		label: Label text. A missing label warns, since it matters for accessibility.
		description: Optional help text rendered below the control.
		wrapper_attributes: Attributes for the wrapper div, overriding the defaults.
	"""
	method = f"{__name__}.input"
	attrs = sanitize_html_attributes(attributes, method)
	input_type = sanitize_input_type(attrs, method)
	if input_type in ("checkbox", "radio") and control.checked_explicitly(attributes):
		# The sanitized attrs lose checked=False, so current must not re-check it
		current = None
	return _field(
		method,
		input_type,
		attrs,
		lambda control_attrs: control.input(control_attrs, current),
		label,
		description,
		wrapper_attributes,
	)


def textarea(
	attributes: Attributes | None,
	current: Any = None,
	label: Any = None,
	description: Any = None,
	wrapper_attributes: Attributes | None = None,
) -> Markup:
	"""Generate a complete field around a `<textarea>` control."""
	method = f"{__name__}.textarea"
	return _field(
		method,
		"textarea",
		sanitize_html_attributes(attributes, method),
		lambda control_attrs: control.textarea(control_attrs, current),
		label,
		description,
		wrapper_attributes,
	)


def select(
	attributes: Attributes | None,
	options: Options | None = None,
	current: Any = None,
	label: Any = None,
	description: Any = None,
	wrapper_attributes: Attributes | None = None,
) -> Markup:
	"""Generate a complete field around a `<select>` control."""
	method = f"{__name__}.select"
	return _field(
		method,
		"select",
		sanitize_html_attributes(attributes, method),
		lambda control_attrs: control.select(control_attrs, options, current),
		label,
		description,
		wrapper_attributes,
	)


__all__ = ["id_base_from_name", "input", "select", "textarea"]
