"""
xaml-forms — 設計文件（顏色、文字樣式、圖層）→ Xamarin.Forms XAML

重複的顏色與文字樣式以結構相等查詢，輸出成共用的 StaticResource 參照。
"""

__version__ = "0.1.0"

from .models import (
    Border,
    Color,
    Fill,
    Layer,
    LayerTextStyle,
    Rect,
    Shadow,
    TextStyle,
    record_to_dict,
)
from .context import Context, Options, Project, ResourceLookup
from .naming import actual_key, to_image_name
from .colors import xaml_color, xaml_color_hex, xaml_color_literal
from .text_styles import font_attributes, xaml_label, xaml_style
from .catalog import (
    export_styleguide_colors,
    export_styleguide_text_styles,
    styleguide_colors,
    styleguide_text_styles,
)
from .layers import layer, xaml_frame, xaml_image
from .output import comment, debug
from .extension import HOST_METHODS, invoke
from .document import DesignDocument, DocumentError, load_document, save_document
from .figma_reader import FigmaAPIClient, FigmaToDocument
from .config import load_config, validate_config

__all__ = [
    "__version__",
    "Border",
    "Color",
    "Fill",
    "Layer",
    "LayerTextStyle",
    "Rect",
    "Shadow",
    "TextStyle",
    "record_to_dict",
    "Context",
    "Options",
    "Project",
    "ResourceLookup",
    "actual_key",
    "to_image_name",
    "xaml_color",
    "xaml_color_hex",
    "xaml_color_literal",
    "font_attributes",
    "xaml_label",
    "xaml_style",
    "export_styleguide_colors",
    "export_styleguide_text_styles",
    "styleguide_colors",
    "styleguide_text_styles",
    "layer",
    "xaml_frame",
    "xaml_image",
    "comment",
    "debug",
    "HOST_METHODS",
    "invoke",
    "DesignDocument",
    "DocumentError",
    "load_document",
    "save_document",
    "FigmaAPIClient",
    "FigmaToDocument",
    "load_config",
    "validate_config",
]
