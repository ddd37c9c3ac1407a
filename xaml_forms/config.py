"""設定檔載入與基本驗證."""

import json
from pathlib import Path
from typing import Any

from .context import Options

DEFAULT_CONFIG_PATH = "xaml-forms.config.json"

# 已知有效的頂層欄位
_KNOWN_TOP_KEYS = {"options", "figma", "export"}

# 各區塊已知欄位（用於拼字提示）
_KNOWN_SECTION_KEYS = {
    "options": {"duplicateSuffix", "sortResources", "ignoreFontFamily", "textAlignmentMode"},
    "figma": {"personalAccessToken", "fileKey"},
    "export": {"outputDir"},
}

_BOOL_OPTIONS = ("sortResources", "ignoreFontFamily")
_VALID_ALIGNMENT_MODES = {"style", "none"}


def _warn(msg: str) -> None:
    print(f"   ⚠️  [config] {msg}")


def validate_config(cfg: dict) -> None:
    """對 config 做基本欄位驗證，印出警告但不拋例外。"""
    if not cfg:
        return

    # 頂層未知欄位
    for key in cfg:
        if key not in _KNOWN_TOP_KEYS:
            known = ", ".join(sorted(_KNOWN_TOP_KEYS))
            _warn(f"未知頂層欄位 '{key}'（已知欄位：{known}）")

    # 各區塊欄位
    for section, known_keys in _KNOWN_SECTION_KEYS.items():
        section_cfg = cfg.get(section, {})
        if not isinstance(section_cfg, dict):
            _warn(f"'{section}' 應為物件，目前是 {type(section_cfg).__name__}")
            continue
        for key in section_cfg:
            if key not in known_keys:
                known = ", ".join(sorted(known_keys))
                _warn(f"[{section}] 未知欄位 '{key}'（已知欄位：{known}）")

    options = cfg.get("options", {})
    if not isinstance(options, dict):
        return

    for name in _BOOL_OPTIONS:
        val = options.get(name)
        if val is not None and not isinstance(val, bool):
            _warn(f"options.{name} 應為 true/false，目前是 {type(val).__name__}")

    suffix = options.get("duplicateSuffix")
    if suffix is not None and not isinstance(suffix, str):
        _warn(f"options.duplicateSuffix 應為字串，目前是 {type(suffix).__name__}")

    mode = options.get("textAlignmentMode")
    if mode is not None and not isinstance(mode, str):
        _warn(f"options.textAlignmentMode 應為字串，目前是 {type(mode).__name__}")
    elif mode is not None and mode not in _VALID_ALIGNMENT_MODES:
        valid = ", ".join(sorted(_VALID_ALIGNMENT_MODES))
        _warn(f"options.textAlignmentMode '{mode}' 不在已知值中（{valid}），將不輸出對齊")


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """載入 JSON 設定檔，不存在則回傳空 dict；存在則做基本驗證。"""
    path = Path(config_path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg: Any = json.load(f)
    if not isinstance(cfg, dict):
        print(f"   ⚠️  [config] '{config_path}' 格式錯誤，應為 JSON 物件，回傳空設定。")
        return {}
    validate_config(cfg)
    return cfg


_OPTION_TYPES = {
    "duplicateSuffix": (str, type(None)),
    "sortResources": bool,
    "ignoreFontFamily": bool,
    "textAlignmentMode": str,
}


def options_from_config(cfg: dict) -> Options:
    """config.options → Options；型別錯誤的欄位（已在 validate_config 警告過）改用預設值。"""
    options = cfg.get("options", {})
    if not isinstance(options, dict):
        return Options()
    valid = {
        key: value for key, value in options.items()
        if key not in _OPTION_TYPES or isinstance(value, _OPTION_TYPES[key])
    }
    return Options.from_dict(valid)
