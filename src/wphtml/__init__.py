"""Sanitized HTML builders for tags, form controls and form fields."""

from wphtml import html
from wphtml.attributes import render_attributes
from wphtml.env import ENV_WPHTML_MODE, HTMLMode, current_mode, is_debug
from wphtml.escaping import (
	esc_attr,
	esc_html,
	esc_textarea,
	parse_args,
	sanitize_html_class,
)
from wphtml.form import control, field
from wphtml.html import *  # noqa: F403
from wphtml.sanitizer import SANITIZED_KEY, sanitize_html_attributes
from wphtml.tag import define_self_closing_tag, define_tag, tag
from wphtml.warning import (
	VERSION,
	DoingItWrongWarning,
	add_listener,
	doing_it_wrong,
	remove_listener,
)

__version__ = VERSION
