"""
Text Style Mapper 單元測試：字重、xaml_style、xaml_label
"""
import pytest
from xaml_forms.context import Context, Options, Project
from xaml_forms.models import Color, Layer, LayerTextStyle, TextStyle, record_to_dict
from xaml_forms.text_styles import font_attributes, round_half_up, xaml_label, xaml_style

BLACK = Color(0, 0, 0, 1.0, name="Black")


def make_context(colors=(), text_styles=(), **options):
    return Context(options=Options(**options), project=Project(colors=colors, text_styles=text_styles))


def make_style(**kwargs):
    base = dict(font_size=14, font_weight=400, font_family="Roboto", text_align="left", color=None)
    base.update(kwargs)
    return TextStyle(**base)


def make_text_layer(text_style, content="Hello"):
    return Layer(name="Title", type="text", content=content, text_styles=[LayerTextStyle(text_style=text_style)])


# ─── font_attributes ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("weight", [700, 800, 900, 950])
def test_bold_weights(weight):
    assert font_attributes(weight) == "Bold"


@pytest.mark.parametrize("weight", [100, 400, 500, 600, 699])
def test_regular_weights(weight):
    assert font_attributes(weight) == "None"


def test_intermediate_heavy_weight_is_bold():
    assert font_attributes(750) == "Bold"
    assert font_attributes(1000) == "Bold"


def test_missing_weight_is_none():
    assert font_attributes(None) == "None"


# ─── round_half_up ───────────────────────────────────────────────────────────

def test_round_half_up():
    assert round_half_up(14.125) == 14.13
    assert round_half_up(14.124) == 14.12


def test_round_integral_returns_int():
    result = round_half_up(16.0)
    assert result == 16
    assert isinstance(result, int)


# ─── xaml_style ──────────────────────────────────────────────────────────────

def test_style_inline_attributes():
    ctx = make_context()
    style = xaml_style(ctx, make_style(font_size=17.456, font_weight=700, text_align="center", color=Color(255, 0, 0)))
    assert style.font_size == 17.46
    assert style.font_attributes == "Bold"
    assert style.font_family == "Roboto"
    assert style.text_color == "#FFFF0000"
    assert style.horizontal_text_alignment == "Center"


def test_style_text_color_uses_registered_resource():
    ctx = make_context(colors=[BLACK])
    style = xaml_style(ctx, make_style(color=Color(0, 0, 0, 1.0)))
    assert style.text_color == "{StaticResource Black}"


def test_style_without_color_omits_text_color():
    style = xaml_style(make_context(), make_style(color=None))
    assert style.text_color is None
    assert "textColor" not in record_to_dict(style)


def test_style_ignore_font_family():
    style = xaml_style(make_context(ignore_font_family=True), make_style())
    assert style.font_family is None


def test_style_missing_font_family():
    style = xaml_style(make_context(), make_style(font_family=None))
    assert "fontFamily" not in record_to_dict(style)


def test_style_alignment_only_in_style_mode():
    style = xaml_style(make_context(text_alignment_mode="none"), make_style(text_align="right"))
    assert style.horizontal_text_alignment is None


def test_style_alignment_capitalized():
    style = xaml_style(make_context(), make_style(text_align="JUSTIFY"))
    assert style.horizontal_text_alignment == "Justify"


# ─── xaml_label ──────────────────────────────────────────────────────────────

def test_label_references_registered_style():
    body = make_style(name="Body")
    ctx = make_context(text_styles=[body])
    label = xaml_label(ctx, make_text_layer(make_style(), content="Welcome"))
    assert record_to_dict(label) == {
        "text": "Welcome",
        "style": "Body",
        "horizontalTextAlignment": "Left",
    }


def test_label_style_reference_key_is_normalized():
    ctx = make_context(text_styles=[make_style(name="Body Large Copy")])
    label = xaml_label(ctx, make_text_layer(make_style()))
    assert label.style == "BodyLarge"


def test_label_inlines_when_no_registered_style():
    ctx = make_context(text_styles=[make_style(name="Body", font_size=12)])
    label = xaml_label(ctx, make_text_layer(make_style(font_weight=900, color=Color(0, 0, 0, 1.0))))
    assert label.style is None
    assert label.font_size == 14
    assert label.font_attributes == "Bold"
    assert label.text_color == "#FF000000"
    assert label.text == "Hello"


def test_label_alignment_overrides_style_reference():
    ctx = make_context(text_styles=[make_style(name="Body", text_align="center")])
    label = xaml_label(ctx, make_text_layer(make_style(text_align="center")))
    assert label.style == "Body"
    assert label.horizontal_text_alignment == "Center"


def test_label_no_alignment_outside_style_mode():
    ctx = make_context(text_styles=[make_style(name="Body")], text_alignment_mode="none")
    label = xaml_label(ctx, make_text_layer(make_style()))
    assert record_to_dict(label) == {"text": "Hello", "style": "Body"}


def test_label_uses_first_text_style_only():
    first = make_style(font_size=20)
    second = make_style(name="Body")
    layer = Layer(
        name="Mixed",
        type="text",
        content="Mixed",
        text_styles=[LayerTextStyle(text_style=first), LayerTextStyle(text_style=second)],
    )
    ctx = make_context(text_styles=[second])
    label = xaml_label(ctx, layer)
    assert label.style is None
    assert label.font_size == 20
