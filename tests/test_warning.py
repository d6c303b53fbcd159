import logging
import warnings
from typing import Any, cast

import pytest
from wphtml.warning import (
	VERSION,
	DoingItWrongWarning,
	add_listener,
	doing_it_wrong,
	registered_listeners,
	remove_listener,
	warn,
)


class TestDoingItWrong:
	def test_warns_in_dev(self):
		with pytest.warns(
			DoingItWrongWarning,
			match=r"\[wphtml\] html\.div was called incorrectly\. Bad input\. \(This message was added in version 1\.0\.0\.\)",
		):
			doing_it_wrong("html.div", "Bad input.", VERSION)

	def test_warning_points_at_the_caller(self):
		with pytest.warns(DoingItWrongWarning) as record:
			doing_it_wrong("html.div", "Bad input.")
			warn("m", "Bad %s.", "input")
		assert [w.filename for w in record] == [__file__, __file__]

	def test_is_a_user_warning(self):
		assert issubclass(DoingItWrongWarning, UserWarning)

	def test_only_logs_in_prod(
		self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
	):
		monkeypatch.setenv("WPHTML_MODE", "prod")
		caplog.set_level(logging.DEBUG, logger="wphtml.warning")
		with warnings.catch_warnings():
			warnings.simplefilter("error")
			doing_it_wrong("html.div", "Bad input.")  # Should not raise
		assert "html.div was called incorrectly. Bad input." in caplog.text


class TestListeners:
	def test_listener_receives_reports(self, monkeypatch: pytest.MonkeyPatch):
		monkeypatch.setenv("WPHTML_MODE", "prod")
		calls: list[tuple[str, str, str]] = []
		add_listener(lambda *args: calls.append(args))

		doing_it_wrong("fn", "message", "0.9.0")

		assert calls == [("fn", "message", "0.9.0")]

	def test_listener_is_registered_once(self):
		def listener(*_args: Any) -> None:
			pass

		add_listener(listener)
		add_listener(listener)
		assert registered_listeners() == [listener]
		remove_listener(listener)
		assert registered_listeners() == []

	def test_remove_unknown_listener_is_noop(self):
		remove_listener(lambda *_args: None)

	def test_rejects_non_callable(self):
		with pytest.raises(TypeError):
			add_listener(cast(Any, "nope"))

	def test_failing_listener_does_not_stop_others(
		self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
	):
		monkeypatch.setenv("WPHTML_MODE", "prod")
		calls: list[str] = []

		def broken(*_args: Any) -> None:
			raise RuntimeError("listener failure")

		add_listener(broken)
		add_listener(lambda function, *_args: calls.append(function))

		doing_it_wrong("fn", "message")

		assert calls == ["fn"]
		assert "listener failure" in caplog.text


class TestWarn:
	def test_formats_replacements(self):
		with pytest.warns(DoingItWrongWarning, match='Attribute "id" is wrong'):
			warn("m", 'Attribute "%s" is %s', "id", "wrong")

	def test_template_without_replacements_is_verbatim(self):
		with pytest.warns(DoingItWrongWarning, match="100% sure"):
			warn("m", "100% sure")

	def test_formatting_error_reports_fallback(self):
		with pytest.warns(
			DoingItWrongWarning,
			match="An error occurred while formatting the warning message from m:",
		):
			warn("m", "%s and %s", "only one")
