from collections.abc import Mapping
from typing import Any, Protocol

from markupsafe import Markup

from wphtml.attributes import render_attributes
from wphtml.escaping import esc_html, parse_args
from wphtml.sanitizer import sanitize_html_attributes, to_string_or_default

Attributes = Mapping[Any, Any]


class TagBuilder(Protocol):
	def __call__(
		self, content: Any = None, attributes: Attributes | None = None
	) -> Markup: ...


class VoidTagBuilder(Protocol):
	def __call__(self, attributes: Attributes | None = None) -> Markup: ...


def tag(
	name: str,
	content: Any = None,
	attributes: Attributes | None = None,
	self_closing: bool = False,
	*,
	method: str | None = None,
) -> Markup:
	"""Render a single HTML element.

	Args:
		name: The tag name (e.g., "div", "br").
		content: Markup placed between the opening and closing tags. It is
			inserted as-is, so escape untrusted text with `esc_html` first.
			Ignored for self-closing tags.
		attributes: Attributes for the element, sanitized before rendering.
		self_closing: Render `<name ... />` instead of an open/close pair.
		method: Name reported in warnings. Defaults to this function.

	Returns:
		The element as `Markup`, safe to embed in other builders or templates.
	"""
	method = method or f"{__name__}.tag"
	attrs = render_attributes(sanitize_html_attributes(attributes, method))
	tag_name = esc_html(name)
	if self_closing:
		return Markup(f"<{tag_name}{attrs} />")

	text = to_string_or_default(
		content,
		method,
		name,
		'Content for HTML tag <%s> of type "%s" could not be converted to string: %s. Using empty string as default.',
		"",
	)
	return Markup(f"<{tag_name}{attrs}>{text}</{tag_name}>")


def _sanitize_defaults(
	name: str, default_attributes: Attributes | None
) -> dict[str, Any]:
	# Unmarked, so merging never flags the caller's attributes as sanitized
	return sanitize_html_attributes(
		default_attributes, f"html.{name}", add_sanitized=False
	)


def define_tag(name: str, default_attributes: Attributes | None = None) -> TagBuilder:
	"""
	Define a builder for an HTML element with content.

	Args:
		name: The tag name (e.g., "div", "span")
		default_attributes: Attributes applied to every element unless overridden

	Returns:
		A function `(content=None, attributes=None) -> Markup`
	"""

	defaults = _sanitize_defaults(name, default_attributes)

	def create_element(content: Any = None, attributes: Attributes | None = None) -> Markup:
		if defaults:
			attributes = parse_args(attributes, defaults)
		return tag(name, content, attributes, method=f"html.{name}")

	create_element.__name__ = name
	create_element.__qualname__ = name
	create_element.__doc__ = f"Generate a `<{name}>` element."
	return create_element


def define_self_closing_tag(
	name: str, default_attributes: Attributes | None = None
) -> VoidTagBuilder:
	"""
	Define a builder for a void HTML element (no content).

	Args:
		name: The tag name (e.g., "br", "img")
		default_attributes: Attributes applied to every element unless overridden

	Returns:
		A function `(attributes=None) -> Markup`
	"""

	defaults = _sanitize_defaults(name, default_attributes)

	def create_element(attributes: Attributes | None = None) -> Markup:
		if defaults:
			attributes = parse_args(attributes, defaults)
		return tag(name, None, attributes, True, method=f"html.{name}")

	create_element.__name__ = name
	create_element.__qualname__ = name
	create_element.__doc__ = f"Generate a `<{name} />` element."
	return create_element


__all__ = [
	"Attributes",
	"TagBuilder",
	"VoidTagBuilder",
	"define_self_closing_tag",
	"define_tag",
	"tag",
]
