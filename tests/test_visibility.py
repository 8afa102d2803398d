import pytest

from goapi.visibility import is_exported


def test_uppercase_first_letter_is_exported():
	assert is_exported("Reader")
	assert not is_exported("reader")
	assert not is_exported("_Reader")


def test_pointer_marker_is_stripped():
	assert is_exported("*Bar")
	assert not is_exported("*bar")


def test_unicode_case_rules():
	assert is_exported("Ärger")
	assert not is_exported("ärger")
	assert not is_exported("日本")


def test_empty_name_fails_fast():
	with pytest.raises(ValueError):
		is_exported("")
	with pytest.raises(ValueError):
		is_exported("*")
