"""
Jinja2 markup renderer — 屬性紀錄 → XAML 字串

每種輸出形狀一個模板（templates/*.xml.j2），純函式、無副作用。
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .colors import static_resource

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _xaml_value(value) -> str:
    """XAML 屬性值：布林 → True/False，整數值的 float 去掉小數."""
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _static_resource_filter(key):
    if key is None:
        return None
    return static_resource(key)


def create_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(enabled_extensions=("xml.j2",), default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["xaml"] = _xaml_value
    env.filters["static_resource"] = _static_resource_filter
    return env


_env = create_environment()


def _render(template_name: str, **data) -> str:
    return _env.get_template(template_name).render(**data).rstrip()


def render_colors(colors: list) -> str:
    return _render("colors.xml.j2", colors=colors)


def render_text_styles(styles: list) -> str:
    return _render("text_styles.xml.j2", styles=styles)


def render_label(label) -> str:
    return _render("label.xml.j2", label=label)


def render_image(image) -> str:
    return _render("image.xml.j2", image=image)


def render_frame(frame) -> str:
    return _render("frame.xml.j2", frame=frame)


def render_resource_dictionary(resources: str) -> str:
    return _render("resource_dictionary.xml.j2", resources=resources)
