"""
設計文件資料模型 — Color / TextStyle / Layer 與輸出用的屬性紀錄

設計實體一律不可變（frozen），相等性只比較「渲染相關」欄位，
name 不參與比較：兩個名字不同但 RGBA 相同的顏色視為同一個資源。
"""

from dataclasses import dataclass, field, fields
from typing import Literal, Optional

LayerKind = Literal["text", "image", "frame"]


@dataclass(frozen=True)
class Color:
    """RGB 為 0–255 整數，alpha 為 0–1 浮點數."""
    r: int
    g: int
    b: int
    a: float = 1.0
    name: str = field(default="", compare=False)

    def to_hex(self) -> dict:
        """各通道的兩位小寫十六進位字串."""
        return {
            "r": f"{self.r:02x}",
            "g": f"{self.g:02x}",
            "b": f"{self.b:02x}",
        }


@dataclass(frozen=True)
class TextStyle:
    font_size: float
    font_weight: int = 400
    font_family: Optional[str] = None
    text_align: str = "left"  # "left" | "center" | "right" | "justify"
    color: Optional[Color] = None
    name: str = field(default="", compare=False)


@dataclass(frozen=True)
class Fill:
    color: Optional[Color] = None


@dataclass(frozen=True)
class Border:
    fill: Optional[Fill] = None
    thickness: float = 1


@dataclass(frozen=True)
class Shadow:
    color: Optional[Color] = None
    offset_x: float = 0
    offset_y: float = 0
    blur_radius: float = 0
    spread: float = 0


@dataclass(frozen=True)
class Rect:
    width: float = 0
    height: float = 0
    x: float = 0
    y: float = 0


@dataclass(frozen=True)
class LayerTextStyle:
    """文字圖層中的一段樣式範圍（range 以字元索引表示）."""
    text_style: TextStyle
    start: int = 0
    end: int = 0


@dataclass
class Layer:
    """設計樹中的一個節點."""
    name: str
    type: str = "shape"
    exportable: bool = False
    rect: Rect = field(default_factory=Rect)
    content: str = ""
    text_styles: list = field(default_factory=list)
    fills: list = field(default_factory=list)
    borders: list = field(default_factory=list)
    shadows: list = field(default_factory=list)
    border_radius: float = 0
    children: list = field(default_factory=list)

    @property
    def kind(self) -> LayerKind:
        if self.type == "text":
            return "text"
        if self.exportable:
            return "image"
        return "frame"


# ─── 屬性紀錄（Mapper 輸出 → Renderer 輸入）─────────────────────────────────
# None 代表「不輸出此屬性」；False 則是真的要輸出的布林值。

@dataclass
class ColorEntry:
    key: str
    color: str


@dataclass
class StyleRecord:
    font_size: float
    font_attributes: str
    font_family: Optional[str] = None
    text_color: Optional[str] = None
    horizontal_text_alignment: Optional[str] = None
    key: Optional[str] = None


@dataclass
class LabelRecord:
    text: str = ""
    style: Optional[str] = None
    font_size: Optional[float] = None
    font_attributes: Optional[str] = None
    font_family: Optional[str] = None
    text_color: Optional[str] = None
    horizontal_text_alignment: Optional[str] = None


@dataclass
class ImageRecord:
    width_request: float
    height_request: float
    source: str


@dataclass
class FrameRecord:
    width_request: float
    height_request: float
    has_shadow: bool
    corner_radius: float
    background_color: Optional[str] = None
    outline_color: Optional[str] = None


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def record_to_dict(record) -> dict:
    """紀錄轉成 camelCase dict；值為 None 的欄位直接省略（absent）."""
    result = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        result[_camel_case(f.name)] = value
    return result
