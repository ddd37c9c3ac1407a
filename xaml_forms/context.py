"""
Host context：選項設定 + 專案層級的資源查詢服務

Mapper 只透過 Context 讀取設定與查詢已註冊資源，不持有任何可變狀態。
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol

from .models import Color, TextStyle

# host 端使用的 camelCase 選項名 → Options 欄位
OPTION_NAMES = {
    "duplicateSuffix": "duplicate_suffix",
    "sortResources": "sort_resources",
    "ignoreFontFamily": "ignore_font_family",
    "textAlignmentMode": "text_alignment_mode",
}


@dataclass
class Options:
    """輸出選項."""
    duplicate_suffix: Optional[str] = " Copy"
    sort_resources: bool = True
    ignore_font_family: bool = False
    text_alignment_mode: str = "style"

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Options":
        """從 camelCase（或 snake_case）dict 建立，未知欄位忽略."""
        kwargs = {}
        for key, value in (data or {}).items():
            attr = OPTION_NAMES.get(key, key)
            if attr in OPTION_NAMES.values():
                kwargs[attr] = value
        return cls(**kwargs)


class ResourceLookup(Protocol):
    """以結構相等（而非名稱）查詢已註冊資源."""

    def find_color_equal(self, color: Color) -> Optional[Color]:
        ...

    def find_text_style_equal(self, text_style: TextStyle) -> Optional[TextStyle]:
        ...


class Project:
    """ResourceLookup 的記憶體實作；同值資源以第一個註冊者為準."""

    def __init__(self, colors: Iterable[Color] = (), text_styles: Iterable[TextStyle] = ()):
        self._colors: dict[Color, Color] = {}
        self._text_styles: dict[TextStyle, TextStyle] = {}
        for color in colors:
            self.register_color(color)
        for text_style in text_styles:
            self.register_text_style(text_style)

    def register_color(self, color: Color) -> Color:
        return self._colors.setdefault(color, color)

    def register_text_style(self, text_style: TextStyle) -> TextStyle:
        return self._text_styles.setdefault(text_style, text_style)

    @property
    def colors(self) -> list:
        return list(self._colors.values())

    @property
    def text_styles(self) -> list:
        return list(self._text_styles.values())

    def find_color_equal(self, color: Color) -> Optional[Color]:
        return self._colors.get(color)

    def find_text_style_equal(self, text_style: TextStyle) -> Optional[TextStyle]:
        return self._text_styles.get(text_style)


@dataclass
class Context:
    options: Options = field(default_factory=Options)
    project: ResourceLookup = field(default_factory=Project)

    def get_option(self, name: str):
        return getattr(self.options, OPTION_NAMES.get(name, name))
