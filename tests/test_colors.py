"""
Color Mapper 單元測試：hex 格式、資源參照解析
"""
import re

import pytest
from xaml_forms.colors import xaml_color, xaml_color_hex, xaml_color_literal
from xaml_forms.context import Context, Options, Project
from xaml_forms.models import Color

HEX_RE = re.compile(r"^#[0-9A-F]{8}$")


def make_context(colors=(), duplicate_suffix=" Copy"):
    return Context(options=Options(duplicate_suffix=duplicate_suffix), project=Project(colors=colors))


# ─── xaml_color_hex ──────────────────────────────────────────────────────────

def test_hex_opaque_red():
    assert xaml_color_hex(Color(255, 0, 0, 1.0)) == "#FFFF0000"


def test_hex_zero_padded_channels():
    assert xaml_color_hex(Color(1, 2, 3, 0.0)) == "#00010203"


def test_hex_alpha_rounds_half_up():
    # 0.5 * 255 = 127.5 → 128 = 0x80
    assert xaml_color_hex(Color(0, 128, 255, 0.5)) == "#800080FF"


def test_hex_uppercase():
    assert xaml_color_hex(Color(171, 205, 239, 1.0)) == "#FFABCDEF"


@pytest.mark.parametrize("color", [
    Color(0, 0, 0, 0.0),
    Color(255, 255, 255, 1.0),
    Color(7, 8, 9, 0.02),
    Color(16, 15, 14, 0.999),
])
def test_hex_always_nine_characters(color):
    result = xaml_color_hex(color)
    assert len(result) == 9
    assert HEX_RE.match(result)


# ─── xaml_color_literal ──────────────────────────────────────────────────────

def test_literal_inline_when_not_registered():
    ctx = make_context()
    assert xaml_color_literal(ctx, Color(0, 0, 0, 1.0)) == "#FF000000"


def test_literal_static_resource_when_registered():
    ctx = make_context(colors=[Color(0, 122, 255, 1.0, name="Primary Blue")])
    assert xaml_color_literal(ctx, Color(0, 122, 255, 1.0)) == "{StaticResource PrimaryBlue}"


def test_literal_resolves_by_value_not_name():
    ctx = make_context(colors=[Color(10, 20, 30, 1.0, name="Ink")])
    a = xaml_color_literal(ctx, Color(10, 20, 30, 1.0, name="Text"))
    b = xaml_color_literal(ctx, Color(10, 20, 30, 1.0, name="Border Dark"))
    assert a == b == "{StaticResource Ink}"


def test_literal_alpha_is_part_of_identity():
    ctx = make_context(colors=[Color(10, 20, 30, 1.0, name="Ink")])
    assert xaml_color_literal(ctx, Color(10, 20, 30, 0.5)) == "#800A141E"


def test_literal_reference_key_strips_suffix():
    ctx = make_context(colors=[Color(1, 1, 1, 1.0, name="Gray Copy")])
    assert xaml_color_literal(ctx, Color(1, 1, 1, 1.0)) == "{StaticResource Gray}"


# ─── xaml_color ──────────────────────────────────────────────────────────────

def test_resource_entry_never_references_itself():
    color = Color(0, 122, 255, 1.0, name="Primary Blue")
    ctx = make_context(colors=[color])
    entry = xaml_color(ctx, color)
    assert entry.key == "PrimaryBlue"
    assert entry.color == "#FF007AFF"
