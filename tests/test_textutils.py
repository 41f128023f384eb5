import os

import pytest

from classiclauncher.textutils import (
    is_all_digits,
    ltrim,
    normalize_path,
    remove_duplicate_slashes,
    replace_string,
    rtrim,
    split_string,
    trim,
)

SEP = os.sep
OTHER = "/" if SEP == "\\" else "\\"


def test_normalize_path_converts_and_collapses():
    raw = f"ClassicLauncher{OTHER}{OTHER}themes{SEP}{SEP}default{OTHER}click.wav"
    assert normalize_path(raw) == f"ClassicLauncher{SEP}themes{SEP}default{SEP}click.wav"


def test_normalize_path_is_idempotent():
    raw = f"a{OTHER}b{SEP}{SEP}{SEP}c{OTHER}"
    once = normalize_path(raw)
    assert normalize_path(once) == once
    assert OTHER not in once


def test_remove_duplicate_slashes():
    assert remove_duplicate_slashes(f"{SEP}{SEP}a{SEP}{SEP}{SEP}b") == f"{SEP}a{SEP}b"


def test_remove_duplicate_slashes_leaves_foreign_separator():
    text = f"a{OTHER}{OTHER}b"
    assert remove_duplicate_slashes(text) == text


def test_replace_string_all_occurrences():
    assert replace_string("a-b-c", "-", "+") == "a+b+c"


def test_replace_string_does_not_rescan_inserted_text():
    assert replace_string("aaa", "a", "aa") == "aaaaaa"


def test_replace_string_empty_pattern_is_noop():
    assert replace_string("value", "", "x") == "value"


def test_split_string_keeps_quoted_section():
    assert split_string('emulator -f "my game.rom"') == ["emulator", "-f", '"my game.rom"']


def test_split_string_collapses_whitespace():
    assert split_string("  one \t two\n three  ") == ["one", "two", "three"]


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_split_string_blank(text):
    assert split_string(text) == []


def test_split_string_unterminated_quote_swallows_rest():
    assert split_string('run "a b c') == ["run", '"a b c']


def test_trim_functions():
    assert ltrim("  abc  ") == "abc  "
    assert rtrim("  abc  ") == "  abc"
    assert trim(" \t abc \n ") == "abc"


def test_trim_keeps_whitespace_only_string():
    assert trim("   ") == "   "
    assert ltrim("\t") == "\t"
    assert rtrim("\n ") == "\n "


@pytest.mark.parametrize(
    "text, expected",
    [("0123456789", True), ("", True), ("12a", False), ("-1", False), ("1.5", False), ("٣", False)],
)
def test_is_all_digits(text, expected):
    assert is_all_digits(text) is expected