"""
TextStyle → XAML Label 屬性

字重只分 Bold / None 兩種；顏色透過 colors.xaml_color_literal 解析，
有同值的已註冊文字樣式時，Label 只輸出 Style 參照。
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .colors import xaml_color_literal
from .models import Layer, LabelRecord, StyleRecord, TextStyle
from .naming import actual_key

BOLD_WEIGHT = 700


def round_half_up(value: float, places: int = 2):
    """四捨五入到指定位數；整數結果回傳 int."""
    quantized = Decimal(str(value)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    number = float(quantized)
    return int(number) if number.is_integer() else number


def font_attributes(font_weight: Optional[int]) -> str:
    if font_weight is not None and font_weight >= BOLD_WEIGHT:
        return "Bold"
    return "None"


def _has_text_alignment(context) -> bool:
    return context.get_option("textAlignmentMode") == "style"


def _text_alignment(context, text_style: TextStyle) -> Optional[str]:
    if not _has_text_alignment(context) or not text_style.text_align:
        return None
    return text_style.text_align.capitalize()


def xaml_style(context, text_style: TextStyle) -> StyleRecord:
    ignore_font_family = context.get_option("ignoreFontFamily")
    text_color = None
    if text_style.color is not None:
        text_color = xaml_color_literal(context, text_style.color)
    return StyleRecord(
        font_size=round_half_up(text_style.font_size),
        font_attributes=font_attributes(text_style.font_weight),
        font_family=None if ignore_font_family else (text_style.font_family or None),
        text_color=text_color,
        horizontal_text_alignment=_text_alignment(context, text_style),
    )


def xaml_label(context, text_layer: Layer) -> LabelRecord:
    """文字圖層 → Label 紀錄（只看第一段樣式）."""
    text_style = text_layer.text_styles[0].text_style
    text_style_resource = context.project.find_text_style_equal(text_style)
    if text_style_resource is not None:
        label = LabelRecord(style=actual_key(context, text_style_resource.name))
    else:
        style = xaml_style(context, text_style)
        label = LabelRecord(
            font_size=style.font_size,
            font_attributes=style.font_attributes,
            font_family=style.font_family,
            text_color=style.text_color,
        )
    label.text = text_layer.content
    # 即使使用 Style 參照，對齊仍以圖層為準覆寫
    label.horizontal_text_alignment = _text_alignment(context, text_style)
    return label
