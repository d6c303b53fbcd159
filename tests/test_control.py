import warnings
from collections.abc import Iterator

import pytest
from wphtml.form import control
from wphtml.warning import DoingItWrongWarning


@pytest.fixture
def no_warnings() -> Iterator[None]:
	with warnings.catch_warnings():
		warnings.simplefilter("error")
		yield


class TestTextarea:
	def test_escapes_current_value(self, no_warnings: None):
		assert (
			control.textarea({"name": "bio"}, "Hello <b>")
			== '<textarea name="bio">Hello &lt;b&gt;</textarea>'
		)

	def test_value_attribute_becomes_content(self):
		with pytest.warns(
			DoingItWrongWarning, match='has a "value" attribute but no content'
		):
			result = control.textarea({"name": "bio", "value": "from value"})
		assert result == '<textarea name="bio">from value</textarea>'

	def test_value_attribute_is_removed(self):
		with pytest.warns(
			DoingItWrongWarning, match='does not support a "value" attribute'
		):
			result = control.textarea({"name": "bio", "value": "ignored"}, "kept")
		assert result == '<textarea name="bio">kept</textarea>'

	def test_empty(self, no_warnings: None):
		assert control.textarea() == "<textarea></textarea>"


class TestInput:
	def test_missing_type_defaults_to_text(self):
		with pytest.warns(DoingItWrongWarning, match='"type" is missing or empty'):
			result = control.input({"name": "q"})
		assert result == '<input name="q" type="text" />'

	def test_type_is_lowercased_and_current_fills_value(self, no_warnings: None):
		assert (
			control.input({"type": "EMAIL", "name": "e"}, "a@b.c")
			== '<input type="email" name="e" value="a@b.c" />'
		)

	def test_first_non_empty_current_is_used(self, no_warnings: None):
		assert (
			control.input({"type": "text"}, ["", "first", "second"])
			== '<input type="text" value="first" />'
		)

	def test_explicit_value_wins_over_current(self, no_warnings: None):
		assert (
			control.input({"type": "number", "value": 3}, "5")
			== '<input type="number" value="3" />'
		)

	def test_empty_value_is_dropped_for_text_types(self):
		with pytest.warns(
			DoingItWrongWarning,
			match='type "text" has an empty "value" attribute which is redundant',
		):
			result = control.input({"type": "text", "value": ""})
		assert result == '<input type="text" />'

	def test_empty_value_is_kept_for_hidden(self, no_warnings: None):
		assert (
			control.input({"type": "hidden", "name": "h", "value": ""})
			== '<input type="hidden" name="h" value="" />'
		)

	def test_checkbox_checked_from_current(self, no_warnings: None):
		assert (
			control.input({"type": "checkbox", "name": "c", "value": "yes"}, ["yes", "no"])
			== '<input type="checkbox" name="c" value="yes" checked="checked" />'
		)

	def test_checkbox_not_checked(self, no_warnings: None):
		assert (
			control.input({"type": "checkbox", "name": "c", "value": "yes"}, "no")
			== '<input type="checkbox" name="c" value="yes" />'
		)

	def test_checkbox_without_value_uses_on(self):
		with pytest.warns(
			DoingItWrongWarning, match='type "checkbox" missing "value" attribute'
		):
			result = control.input({"type": "checkbox", "name": "c"}, "on")
		assert result == '<input type="checkbox" name="c" checked="checked" />'

	def test_explicit_checked_is_kept(self, no_warnings: None):
		assert (
			control.input({"type": "radio", "value": "a", "checked": "checked"}, "b")
			== '<input type="radio" value="a" checked="checked" />'
		)

	def test_radio_with_numeric_value(self, no_warnings: None):
		assert (
			control.input({"type": "radio", "value": 2}, 2)
			== '<input type="radio" value="2" checked="checked" />'
		)

	def test_submit_without_value_takes_current(self):
		with pytest.warns(
			DoingItWrongWarning, match='type "submit" missing "value" attribute'
		):
			result = control.input({"type": "submit"}, "Save")
		assert result == '<input type="submit" value="Save" />'

	def test_button_with_empty_value(self):
		with pytest.warns(
			DoingItWrongWarning, match='type "button" has empty "value" attribute'
		):
			result = control.input({"type": "button", "value": ""})
		assert result == '<input type="button" value="" />'

	def test_file_value_is_removed(self):
		with pytest.warns(DoingItWrongWarning, match='Input type "file" cannot have a preset value'):
			result = control.input({"type": "file", "value": "x"})
		assert result == '<input type="file" />'

	def test_password_value_is_kept_with_warning(self):
		with pytest.warns(DoingItWrongWarning, match="not recommended for security reasons"):
			result = control.input({"type": "password", "value": "s3cret"})
		assert result == '<input type="password" value="s3cret" />'

	def test_unconvertible_current_is_skipped(self):
		with pytest.warns(
			DoingItWrongWarning, match='Current <input> value \\(index: "0"\\) of type "dict"'
		):
			result = control.input({"type": "text"}, [{"a": 1}, "ok"])
		assert result == '<input type="text" value="ok" />'

	def test_checked_false_overrides_current(self, no_warnings: None):
		assert (
			control.input({"type": "checkbox", "value": "a", "checked": False}, "a")
			== '<input type="checkbox" value="a" />'
		)


class TestOption:
	def test_option(self, no_warnings: None):
		assert control.option("One", {"value": "1"}) == '<option value="1">One</option>'

	def test_missing_value_warns(self):
		with pytest.warns(DoingItWrongWarning, match='<option> missing "value" attribute'):
			assert control.option("One") == "<option>One</option>"

	def test_missing_text_and_label_warns(self):
		with pytest.warns(
			DoingItWrongWarning, match='requires either non-empty text content or a "label"'
		):
			control.option("", {"value": "x"})

	def test_label_attribute_is_enough(self, no_warnings: None):
		assert (
			control.option("", {"value": "x", "label": "X"})
			== '<option value="x" label="X"></option>'
		)


class TestSelect:
	def test_mapping_options(self, no_warnings: None):
		assert control.select({"name": "color"}, {"r": "Red", "g": "Green"}, "g") == (
			'<select name="color">'
			+ '<option value="r">Red</option>'
			+ '<option value="g" selected="selected">Green</option>'
			+ "</select>"
		)

	def test_optgroups(self, no_warnings: None):
		assert control.select({"name": "n"}, {"Warm": {"r": "Red"}, "b": "Blue"}) == (
			'<select name="n">'
			+ '<optgroup label="Warm"><option value="r">Red</option></optgroup>'
			+ '<option value="b">Blue</option>'
			+ "</select>"
		)

	def test_several_current_values_without_multiple(self):
		with pytest.warns(DoingItWrongWarning, match="received 2 current values"):
			result = control.select({"name": "n"}, [("a", "A"), ("b", "B")], ["a", "b"])
		assert result == (
			'<select name="n">'
			+ '<option value="a" selected="selected">A</option>'
			+ '<option value="b">B</option>'
			+ "</select>"
		)

	def test_multiple(self, no_warnings: None):
		result = control.select(
			{"name": "n[]", "multiple": True}, [("a", "A"), ("b", "B")], ["a", "b"]
		)
		assert result == (
			'<select name="n[]" multiple="multiple">'
			+ '<option value="a" selected="selected">A</option>'
			+ '<option value="b" selected="selected">B</option>'
			+ "</select>"
		)

	def test_numeric_option_values(self, no_warnings: None):
		assert control.select({"name": "n"}, {1: "One"}, 1) == (
			'<select name="n"><option value="1" selected="selected">One</option></select>'
		)

	def test_plain_list_of_values(self, no_warnings: None):
		assert control.select({"name": "n"}, ["red", "ab"], "ab") == (
			'<select name="n">'
			+ '<option value="red">red</option>'
			+ '<option value="ab" selected="selected">ab</option>'
			+ "</select>"
		)

	def test_malformed_option_is_skipped(self):
		with pytest.warns(
			DoingItWrongWarning, match='Option at index "1" of type "tuple"'
		):
			result = control.select({"name": "n"}, [("a", "A"), ("b", "B", "extra")])
		assert result == '<select name="n"><option value="a">A</option></select>'

	def test_unconvertible_value_warns_once(self):
		with warnings.catch_warnings(record=True) as caught:
			warnings.simplefilter("always")
			result = control.select({"name": "n"}, [([1], "One"), ("b", "B")])
		assert [str(w.message) for w in caught] == [
			'[wphtml] wphtml.form.control.select was called incorrectly. Value for HTML tag <option> of type "list" could not be converted to string: list has no string conversion. Skipping this option. (This message was added in version 1.0.0.)'
		]
		assert result == '<select name="n"><option value="b">B</option></select>'
