"""
命名正規化 — 資源 key 與圖片名稱

actual_key：去掉 duplicate suffix 與所有空白，作為 XAML x:Key。
to_image_name：圖層名稱 → camelCase 圖片資源名稱。
"""

import re

_WHITESPACE_RE = re.compile(r"\s")


def _strip_key(key: str, duplicate_suffix) -> str:
    if duplicate_suffix:
        key = key.replace(duplicate_suffix, "", 1)
    return _WHITESPACE_RE.sub("", key)


def actual_key(context, key: str) -> str:
    """設計工具名稱 → XAML 資源 key（冪等）."""
    duplicate_suffix = context.get_option("duplicateSuffix")
    while True:
        stripped = _strip_key(key, duplicate_suffix)
        if stripped == key:
            return key
        key = stripped


def to_image_name(layer_name: str) -> str:
    """Header_Icon → headerIcon."""
    words = layer_name.replace("_", " ").split(" ")
    camel = words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])
    return _WHITESPACE_RE.sub("", camel)
