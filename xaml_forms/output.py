"""Entry-point 回傳格式：{code, language[, filename]}."""

import dataclasses
import json

from .models import record_to_dict

XAML_LANGUAGE = "xml"


def xaml_code(code: str) -> dict:
    return {"code": code, "language": XAML_LANGUAGE}


def xaml_file(code: str, filename: str) -> dict:
    return {"code": code, "language": XAML_LANGUAGE, "filename": filename}


def _to_jsonable(obj):
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return record_to_dict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def debug(obj) -> dict:
    """除錯用：原始物件 dump 成 JSON."""
    return {"code": json.dumps(obj, default=_to_jsonable, ensure_ascii=False), "language": "json"}


def comment(context, text: str) -> str:
    return f"<!-- {text} -->"
