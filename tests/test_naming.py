"""
命名正規化單元測試：actual_key / to_image_name
"""
import pytest
from xaml_forms.context import Context, Options
from xaml_forms.naming import actual_key, to_image_name


def make_context(duplicate_suffix=" Copy"):
    return Context(options=Options(duplicate_suffix=duplicate_suffix))


# ─── actual_key ──────────────────────────────────────────────────────────────

def test_actual_key_strips_whitespace():
    assert actual_key(make_context(), "Primary Blue") == "PrimaryBlue"


def test_actual_key_strips_all_whitespace_kinds():
    assert actual_key(make_context(), " Brand\tAccent\n") == "BrandAccent"


def test_actual_key_strips_duplicate_suffix():
    assert actual_key(make_context(), "Primary Copy") == "Primary"


def test_actual_key_strips_only_first_suffix_occurrence():
    # 第二個 " Copy" 在去空白後只剩 "Copy"
    assert actual_key(make_context(), "Blue Copy Copy") == "BlueCopy"


def test_actual_key_keeps_case_and_punctuation():
    assert actual_key(make_context(), "text-Primary/Dark") == "text-Primary/Dark"


def test_actual_key_without_suffix_option():
    assert actual_key(make_context(duplicate_suffix=None), "Blue Copy") == "BlueCopy"
    assert actual_key(make_context(duplicate_suffix=""), "Blue Copy") == "BlueCopy"


@pytest.mark.parametrize("suffix", [" Copy", "_copy", "Copy"])
@pytest.mark.parametrize("name", [
    "Primary Copy",
    "a_copy_copy",
    "Co py",
    "Blue Copy Copy",
    "Plain",
    "",
])
def test_actual_key_is_idempotent(suffix, name):
    ctx = make_context(duplicate_suffix=suffix)
    once = actual_key(ctx, name)
    assert actual_key(ctx, once) == once


# ─── to_image_name ───────────────────────────────────────────────────────────

def test_image_name_underscore():
    assert to_image_name("Header_Icon") == "headerIcon"


def test_image_name_single_word():
    assert to_image_name("background") == "background"
    assert to_image_name("Background") == "background"


def test_image_name_spaces_and_case():
    assert to_image_name("MAIN menu BUTTON") == "mainMenuButton"


def test_image_name_every_underscore_replaced():
    assert to_image_name("ic_arrow_back") == "icArrowBack"


def test_image_name_collapses_repeated_separators():
    assert to_image_name("tab  bar__icon") == "tabBarIcon"
