"""
Host 外掛介面 — 以 host 使用的 camelCase 方法名稱對應各 entry point
"""

from .catalog import (
    export_styleguide_colors,
    export_styleguide_text_styles,
    styleguide_colors,
    styleguide_text_styles,
)
from .layers import layer
from .output import comment

HOST_METHODS = {
    "comment": comment,
    "styleguideColors": styleguide_colors,
    "styleguideTextStyles": styleguide_text_styles,
    "exportStyleguideColors": export_styleguide_colors,
    "exportStyleguideTextStyles": export_styleguide_text_styles,
    "layer": layer,
}


def invoke(method: str, context, *args):
    """host 呼叫入口；未支援的方法回傳 None（host 會略過該輸出）."""
    handler = HOST_METHODS.get(method)
    if handler is None:
        return None
    return handler(context, *args)
