"""Color → XAML 色彩字面值 / StaticResource 參照."""

import math

from .models import Color, ColorEntry
from .naming import actual_key


def static_resource(key: str) -> str:
    return f"{{StaticResource {key}}}"


def xaml_color_hex(color: Color) -> str:
    """#AARRGGBB，全大寫."""
    hex_channels = color.to_hex()
    alpha = math.floor(color.a * 255 + 0.5)
    return f"#{alpha:02x}{hex_channels['r']}{hex_channels['g']}{hex_channels['b']}".upper()


def xaml_color_literal(context, color: Color) -> str:
    """已註冊的同值顏色 → {StaticResource key}；否則內嵌 hex."""
    color_resource = context.project.find_color_equal(color)
    if color_resource is not None:
        return static_resource(actual_key(context, color_resource.name))
    return xaml_color_hex(color)


def xaml_color(context, color: Color) -> ColorEntry:
    # 定義資源本身時不可再解析成參照
    return ColorEntry(key=actual_key(context, color.name), color=xaml_color_hex(color))
