"""
設計文件 JSON 讀寫

格式：{"colors": [...], "textStyles": [...], "layers": [...]}，欄位名稱用 camelCase。
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .context import Project
from .models import Border, Color, Fill, Layer, LayerTextStyle, Rect, Shadow, TextStyle


class DocumentError(ValueError):
    """設計文件格式錯誤."""


@dataclass
class DesignDocument:
    colors: list = field(default_factory=list)
    text_styles: list = field(default_factory=list)
    layers: list = field(default_factory=list)

    def project(self) -> Project:
        return Project(self.colors, self.text_styles)


def _get(data: dict, key: str, default):
    """JSON null 視同欄位不存在."""
    value = data.get(key)
    return default if value is None else value


def _require(data: dict, key: str, kind: str):
    if key not in data:
        raise DocumentError(f"{kind} 缺少欄位 '{key}'：{data!r}")
    return data[key]


# ─── dict → model ──────────────────────────────────────────────────────────

def color_from_dict(data: dict) -> Color:
    if not isinstance(data, dict):
        raise DocumentError(f"color 應為物件，目前是 {type(data).__name__}")
    return Color(
        r=int(_require(data, "r", "color")),
        g=int(_require(data, "g", "color")),
        b=int(_require(data, "b", "color")),
        a=float(_get(data, "a", 1.0)),
        name=_get(data, "name", ""),
    )


def _optional_color(data: Optional[dict]) -> Optional[Color]:
    return color_from_dict(data) if data else None


def text_style_from_dict(data: dict) -> TextStyle:
    return TextStyle(
        font_size=float(_require(data, "fontSize", "textStyle")),
        font_weight=int(_get(data, "fontWeight", 400)),
        font_family=data.get("fontFamily"),
        text_align=_get(data, "textAlign", "left"),
        color=_optional_color(data.get("color")),
        name=_get(data, "name", ""),
    )


def layer_from_dict(data: dict) -> Layer:
    name = _require(data, "name", "layer")
    rect = data.get("rect") or {}
    return Layer(
        name=name,
        type=_get(data, "type", "shape"),
        exportable=bool(data.get("exportable", False)),
        rect=Rect(
            width=rect.get("width", 0),
            height=rect.get("height", 0),
            x=rect.get("x", 0),
            y=rect.get("y", 0),
        ),
        content=_get(data, "content", ""),
        text_styles=[
            LayerTextStyle(
                text_style=text_style_from_dict(_require(entry, "textStyle", "layer.textStyles")),
                start=(entry.get("range") or {}).get("start", 0),
                end=(entry.get("range") or {}).get("end", 0),
            )
            for entry in _get(data, "textStyles", [])
        ],
        fills=[Fill(color=_optional_color(f.get("color"))) for f in _get(data, "fills", [])],
        borders=[
            Border(
                fill=Fill(color=_optional_color((b.get("fill") or {}).get("color"))) if b.get("fill") else None,
                thickness=b.get("thickness", 1),
            )
            for b in _get(data, "borders", [])
        ],
        shadows=[
            Shadow(
                color=_optional_color(s.get("color")),
                offset_x=s.get("offsetX", 0),
                offset_y=s.get("offsetY", 0),
                blur_radius=s.get("blurRadius", 0),
                spread=s.get("spread", 0),
            )
            for s in _get(data, "shadows", [])
        ],
        border_radius=_get(data, "borderRadius", 0),
        children=[layer_from_dict(child) for child in _get(data, "children", [])],
    )


def document_from_dict(data: dict) -> DesignDocument:
    if not isinstance(data, dict):
        raise DocumentError("設計文件應為 JSON 物件")
    try:
        return DesignDocument(
            colors=[color_from_dict(c) for c in _get(data, "colors", [])],
            text_styles=[text_style_from_dict(t) for t in _get(data, "textStyles", [])],
            layers=[layer_from_dict(layer) for layer in _get(data, "layers", [])],
        )
    except DocumentError:
        raise
    except (TypeError, ValueError, AttributeError) as e:
        raise DocumentError(f"設計文件欄位型別錯誤：{e}") from e


# ─── model → dict ──────────────────────────────────────────────────────────

def color_to_dict(color: Color) -> dict:
    return {"name": color.name, "r": color.r, "g": color.g, "b": color.b, "a": color.a}


def _optional_color_dict(color: Optional[Color]) -> Optional[dict]:
    return color_to_dict(color) if color is not None else None


def text_style_to_dict(text_style: TextStyle) -> dict:
    data = {
        "name": text_style.name,
        "fontSize": text_style.font_size,
        "fontWeight": text_style.font_weight,
        "fontFamily": text_style.font_family,
        "textAlign": text_style.text_align,
    }
    if text_style.color is not None:
        data["color"] = color_to_dict(text_style.color)
    return data


def layer_to_dict(layer: Layer) -> dict:
    data = {
        "name": layer.name,
        "type": layer.type,
        "exportable": layer.exportable,
        "rect": {"x": layer.rect.x, "y": layer.rect.y, "width": layer.rect.width, "height": layer.rect.height},
    }
    if layer.type == "text":
        data["content"] = layer.content
        data["textStyles"] = [
            {"textStyle": text_style_to_dict(e.text_style), "range": {"start": e.start, "end": e.end}}
            for e in layer.text_styles
        ]
    if layer.fills:
        data["fills"] = [{"color": _optional_color_dict(f.color)} for f in layer.fills]
    if layer.borders:
        data["borders"] = [
            {
                "fill": {"color": _optional_color_dict(b.fill.color)} if b.fill else None,
                "thickness": b.thickness,
            }
            for b in layer.borders
        ]
    if layer.shadows:
        data["shadows"] = [
            {
                "color": _optional_color_dict(s.color),
                "offsetX": s.offset_x,
                "offsetY": s.offset_y,
                "blurRadius": s.blur_radius,
                "spread": s.spread,
            }
            for s in layer.shadows
        ]
    if layer.border_radius:
        data["borderRadius"] = layer.border_radius
    if layer.children:
        data["children"] = [layer_to_dict(child) for child in layer.children]
    return data


def document_to_dict(document: DesignDocument) -> dict:
    return {
        "colors": [color_to_dict(c) for c in document.colors],
        "textStyles": [text_style_to_dict(t) for t in document.text_styles],
        "layers": [layer_to_dict(layer) for layer in document.layers],
    }


# ─── 檔案 I/O ──────────────────────────────────────────────────────────────

def load_document(path: str) -> DesignDocument:
    """讀取設計文件；檔案不存在時丟 FileNotFoundError."""
    with open(Path(path), "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DocumentError(f"'{path}' 不是合法的 JSON：{e}") from e
    return document_from_dict(data)


def save_document(document: DesignDocument, path: str) -> str:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(document_to_dict(document), f, indent=2, ensure_ascii=False)
    return str(out)


def find_layer(document: DesignDocument, name: str) -> Optional[Layer]:
    """深度優先搜尋第一個同名圖層."""
    stack = list(reversed(document.layers))
    while stack:
        layer = stack.pop()
        if layer.name == name:
            return layer
        stack.extend(reversed(layer.children))
    return None
