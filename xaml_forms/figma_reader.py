"""
Figma REST API 讀取 → 設計文件

讀取 Figma 檔案，將已發佈的 FILL / TEXT style 轉成 Color / TextStyle，
第一個頁面的圖層樹轉成 Layer。
"""

from typing import Optional

import requests

from .document import DesignDocument
from .models import Border, Color, Fill, Layer, LayerTextStyle, Rect, Shadow, TextStyle


class FigmaAPIClient:
    """Figma REST API 唯讀封裝."""

    BASE_URL = "https://api.figma.com/v1"

    def __init__(self, token: str, timeout: float = 30):
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "X-Figma-Token": token,
            "Content-Type": "application/json",
        })

    def get_file(self, file_key: str) -> dict:
        url = f"{self.BASE_URL}/files/{file_key}"
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()


_TEXT_ALIGN_MAP = {
    "LEFT": "left",
    "CENTER": "center",
    "RIGHT": "right",
    "JUSTIFIED": "justify",
}


def _channel(value: float) -> int:
    return max(0, min(255, int(round(value * 255))))


def figma_paint_to_color(paint: dict, name: str = "") -> Optional[Color]:
    """只處理可見的 SOLID paint；paint opacity 併入 alpha."""
    if not paint.get("visible", True) or paint.get("type") != "SOLID":
        return None
    c = paint.get("color", {})
    alpha = c.get("a", 1) * paint.get("opacity", 1)
    return Color(
        r=_channel(c.get("r", 0)),
        g=_channel(c.get("g", 0)),
        b=_channel(c.get("b", 0)),
        a=round(float(alpha), 4),
        name=name,
    )


def _first_color(paints: list, name: str = "") -> Optional[Color]:
    for paint in paints or []:
        color = figma_paint_to_color(paint, name)
        if color is not None:
            return color
    return None


class FigmaToDocument:
    """將 Figma 檔案 JSON 轉成 DesignDocument."""

    def convert(self, figma_file: dict, page_index: int = 0) -> DesignDocument:
        styles = figma_file.get("styles", {})
        pages = figma_file.get("document", {}).get("children", [])

        colors: dict[str, Color] = {}
        text_styles: dict[str, TextStyle] = {}
        for page in pages:
            self._collect_styles(page, styles, colors, text_styles)

        layers = []
        if 0 <= page_index < len(pages):
            layers = [
                self.convert_node(node)
                for node in pages[page_index].get("children", [])
                if node.get("visible", True)
            ]
        return DesignDocument(
            colors=list(colors.values()),
            text_styles=list(text_styles.values()),
            layers=layers,
        )

    def _collect_styles(self, node: dict, styles: dict, colors: dict, text_styles: dict) -> None:
        # 同一個 style 以第一個使用它的節點為準
        for kind, style_id in (node.get("styles") or {}).items():
            meta = styles.get(style_id)
            if not meta or style_id in colors or style_id in text_styles:
                continue
            style_name = meta.get("name", style_id)
            if kind == "fill" and meta.get("styleType") == "FILL":
                color = _first_color(node.get("fills"), style_name)
                if color is not None:
                    colors[style_id] = color
            elif kind == "text" and meta.get("styleType") == "TEXT":
                text_styles[style_id] = self._text_style(node, style_name)
        for child in node.get("children", []):
            self._collect_styles(child, styles, colors, text_styles)

    def _text_style(self, node: dict, name: str = "") -> TextStyle:
        style = node.get("style", {})
        return TextStyle(
            font_size=style.get("fontSize", 14),
            font_weight=style.get("fontWeight", 400),
            font_family=style.get("fontFamily"),
            text_align=_TEXT_ALIGN_MAP.get(style.get("textAlignHorizontal", "LEFT"), "left"),
            color=_first_color(node.get("fills")),
            name=name,
        )

    def convert_node(self, node: dict) -> Layer:
        node_type = node.get("type", "FRAME")
        bbox = node.get("absoluteBoundingBox") or {}
        layer = Layer(
            name=node.get("name", "Unnamed"),
            type="text" if node_type == "TEXT" else node_type.lower(),
            exportable=bool(node.get("exportSettings")),
            rect=Rect(
                width=bbox.get("width", 0),
                height=bbox.get("height", 0),
                x=bbox.get("x", 0),
                y=bbox.get("y", 0),
            ),
            border_radius=node.get("cornerRadius", 0),
        )
        if node_type == "TEXT":
            characters = node.get("characters", "")
            layer.content = characters
            layer.text_styles = [
                LayerTextStyle(text_style=self._text_style(node), start=0, end=len(characters)),
            ]
        else:
            layer.fills = [
                Fill(color=c) for c in (figma_paint_to_color(p) for p in node.get("fills", [])) if c
            ]
            layer.borders = [
                Border(fill=Fill(color=c), thickness=node.get("strokeWeight", 1))
                for c in (figma_paint_to_color(p) for p in node.get("strokes", []))
                if c
            ]
        layer.shadows = [
            Shadow(
                color=_first_color([{"type": "SOLID", "color": e.get("color", {})}]),
                offset_x=e.get("offset", {}).get("x", 0),
                offset_y=e.get("offset", {}).get("y", 0),
                blur_radius=e.get("radius", 0),
                spread=e.get("spread", 0),
            )
            for e in node.get("effects", [])
            if e.get("visible", True) and e.get("type") == "DROP_SHADOW"
        ]
        layer.children = [
            self.convert_node(child)
            for child in node.get("children", [])
            if child.get("visible", True)
        ]
        return layer
