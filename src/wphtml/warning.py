from __future__ import annotations

import inspect
import logging
import os
import warnings
from collections.abc import Callable

from wphtml.env import is_debug

VERSION = "1.0.0"

logger = logging.getLogger(__name__)

Listener = Callable[[str, str, str], object]

_LISTENERS: list[Listener] = []


class DoingItWrongWarning(UserWarning):
	"""A builder was called with arguments it had to fix up or discard."""


def add_listener(listener: Listener) -> None:
	if not callable(listener):
		raise TypeError("doing_it_wrong listener must be callable")
	if listener not in _LISTENERS:
		_LISTENERS.append(listener)


def remove_listener(listener: Listener) -> None:
	try:
		_LISTENERS.remove(listener)
	except ValueError:
		pass


def registered_listeners() -> list[Listener]:
	return list(_LISTENERS)


_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def _caller_stacklevel() -> int:
	"""Stack level of the first frame outside wphtml, relative to warnings.warn."""
	frame = inspect.currentframe()
	# Level 0 is this frame, level 1 is doing_it_wrong
	level = 0
	try:
		while frame is not None:
			filename = os.path.abspath(frame.f_code.co_filename)
			if not filename.startswith(_PACKAGE_DIR + os.sep):
				return level
			frame = frame.f_back
			level += 1
		return level
	finally:
		del frame


def doing_it_wrong(function: str, message: str, version: str = VERSION) -> None:
	"""Report incorrect usage of a builder.

	Listeners are always notified. In dev and ci modes the report is also
	issued as a `DoingItWrongWarning`; in prod it is only logged at DEBUG.
	"""
	for listener in list(_LISTENERS):
		try:
			listener(function, message, version)
		except Exception:
			logger.exception("doing_it_wrong listener %r failed", listener)

	text = (
		f"[wphtml] {function} was called incorrectly. {message} "
		+ f"(This message was added in version {version}.)"
	)
	if is_debug():
		warnings.warn(text, DoingItWrongWarning, stacklevel=_caller_stacklevel())
	else:
		logger.debug(text)


def warn(method: str, template: str, *replacements: str) -> None:
	"""Format `template` with printf-style `replacements` and report it."""
	try:
		message = template % replacements if replacements else template
	except (TypeError, ValueError) as exc:
		message = (
			f"An error occurred while formatting the warning message from {method}: {exc}"
		)
	doing_it_wrong(method, message, VERSION)


__all__ = [
	"VERSION",
	"DoingItWrongWarning",
	"Listener",
	"add_listener",
	"doing_it_wrong",
	"registered_listeners",
	"remove_listener",
	"warn",
]
