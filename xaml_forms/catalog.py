"""
Styleguide 資源目錄 — Colors.xaml / Labels.xaml

排序（sortResources）與 duplicate suffix 過濾後，輸出 ResourceDictionary 內容。
被過濾的副本仍保留在 project 查詢索引中，只是不再另外定義資源。
"""

import dataclasses

from .colors import xaml_color
from .naming import actual_key
from .output import xaml_code, xaml_file
from .renderer import render_colors, render_resource_dictionary, render_text_styles
from .text_styles import xaml_style

COLORS_FILENAME = "Colors.xaml"
LABELS_FILENAME = "Labels.xaml"


def _process_resources(context, resources) -> list:
    sort_resources = context.get_option("sortResources")
    duplicate_suffix = context.get_option("duplicateSuffix")
    processed = list(resources)

    if sort_resources:
        processed = sorted(processed, key=lambda resource: resource.name)

    if duplicate_suffix:
        processed = [r for r in processed if not r.name.endswith(duplicate_suffix)]

    return processed


def styleguide_colors(context, colors) -> dict:
    entries = [xaml_color(context, color) for color in _process_resources(context, colors)]
    return xaml_code(render_colors(entries))


def styleguide_text_styles(context, text_styles) -> dict:
    styles = [
        dataclasses.replace(xaml_style(context, text_style), key=actual_key(context, text_style.name))
        for text_style in _process_resources(context, text_styles)
    ]
    return xaml_code(render_text_styles(styles))


def export_styleguide_colors(context, colors) -> dict:
    resources = styleguide_colors(context, colors)["code"]
    return xaml_file(render_resource_dictionary(resources), COLORS_FILENAME)


def export_styleguide_text_styles(context, text_styles) -> dict:
    resources = styleguide_text_styles(context, text_styles)["code"]
    return xaml_file(render_resource_dictionary(resources), LABELS_FILENAME)
