from typing import Any

from markupsafe import Markup

from wphtml.escaping import esc_textarea
from wphtml.sanitizer import to_string_or_default
from wphtml.tag import Attributes, define_self_closing_tag, define_tag, tag

# Elements with content
TAGS: list[tuple[str, Attributes | None]] = [
	("abbr", None),
	("address", None),
	("article", None),
	("aside", None),
	("audio", None),
	("b", None),
	("bdi", None),
	("bdo", None),
	("blockquote", None),
	("body", None),
	("button", None),
	("canvas", None),
	("caption", None),
	("cite", None),
	("code", None),
	("colgroup", None),
	("data", None),
	("datalist", None),
	("dd", None),
	("del", None),
	("details", None),
	("dfn", None),
	("dialog", None),
	("div", None),
	("dl", None),
	("dt", None),
	("em", None),
	("fieldset", None),
	("figcaption", None),
	("figure", None),
	("footer", None),
	("form", None),
	("h1", None),
	("h2", None),
	("h3", None),
	("h4", None),
	("h5", None),
	("h6", None),
	("head", None),
	("header", None),
	("hgroup", None),
	("html", None),
	("i", None),
	("iframe", None),
	("ins", None),
	("kbd", None),
	("label", None),
	("legend", None),
	("li", None),
	("main", None),
	("map", None),
	("mark", None),
	("menu", None),
	("meter", None),
	("nav", None),
	("noscript", None),
	("object", None),
	("ol", None),
	("optgroup", None),
	("option", None),
	("output", None),
	("p", None),
	("picture", None),
	("pre", None),
	("progress", None),
	("q", None),
	("rp", None),
	("rt", None),
	("ruby", None),
	("s", None),
	("samp", None),
	("script", None),
	("search", None),
	("section", None),
	("select", None),
	("small", None),
	("span", None),
	("strong", None),
	("style", None),
	("sub", None),
	("summary", None),
	("sup", None),
	("table", None),
	("tbody", None),
	("td", None),
	("template", None),
	("tfoot", None),
	("th", None),
	("thead", None),
	("time", None),
	("title", None),
	("tr", None),
	("u", None),
	("ul", None),
	("var", None),
	("video", None),
]

# Void elements
SELF_CLOSING_TAGS: list[tuple[str, Attributes | None]] = [
	("area", None),
	("base", None),
	("br", None),
	("col", None),
	("embed", None),
	("hr", None),
	("img", None),
	("input", None),
	("link", None),
	("meta", None),
	("param", None),
	("source", None),
	("track", None),
	("wbr", None),
]

# Names that would shadow a keyword or a builtin used by callers
_RENAMED = {"del": "del_", "map": "map_", "object": "object_"}

globals_dict = globals()

for name, default_attributes in TAGS:
	globals_dict[_RENAMED.get(name, name)] = define_tag(name, default_attributes)

for name, default_attributes in SELF_CLOSING_TAGS:
	globals_dict[name] = define_self_closing_tag(name, default_attributes)


def a(content: Any = None, attributes: Attributes | None = None) -> Markup:
	"""Generate an anchor `<a>` element.

	Without a non-empty `href` the link points to "#" and gets `role="button"`
	unless a role is given. Without content the href is used as the text.
	"""
	attrs = dict(attributes or {})
	if not attrs.get("href"):
		attrs["href"] = "#"
		if attrs.get("role") is None:
			attrs["role"] = "button"
	if content is None:
		content = attrs["href"]
	return tag("a", content, attrs, method="html.a")


def textarea(content: Any = None, attributes: Attributes | None = None) -> Markup:
	"""Generate a `<textarea>` element. The content is escaped."""
	text = to_string_or_default(
		content,
		"html.textarea",
		"textarea",
		'Content for HTML tag <%s> of type "%s" could not be converted to string: %s. Using empty string as default.',
		"",
	)
	return tag("textarea", esc_textarea(text), attributes, method="html.textarea")


__all__ = [
	"SELF_CLOSING_TAGS",
	"TAGS",
	"a",
	"textarea",
	# <html> is only reachable as wphtml.html.html
	*sorted(_RENAMED.get(name, name) for name, _ in TAGS if name != "html"),
	*sorted(name for name, _ in SELF_CLOSING_TAGS),
]
