"""
Layer → XAML 元素

依圖層種類（Layer.kind）三選一：text → Label、image → Image、frame → Frame，
各分支互斥，不會組合。
"""

from .colors import xaml_color_literal
from .models import FrameRecord, ImageRecord, Layer
from .naming import to_image_name
from .output import xaml_code
from .renderer import render_frame, render_image, render_label
from .text_styles import xaml_label


def xaml_image(context, image_layer: Layer) -> ImageRecord:
    return ImageRecord(
        width_request=image_layer.rect.width,
        height_request=image_layer.rect.height,
        source=to_image_name(image_layer.name),
    )


def xaml_frame(context, frame_layer: Layer) -> FrameRecord:
    frame = FrameRecord(
        width_request=frame_layer.rect.width,
        height_request=frame_layer.rect.height,
        has_shadow=bool(frame_layer.shadows),
        corner_radius=frame_layer.border_radius or 0,
    )

    if frame_layer.fills:
        color = frame_layer.fills[0].color
        if color is not None:
            frame.background_color = xaml_color_literal(context, color)

    if frame_layer.borders:
        fill = frame_layer.borders[0].fill
        if fill is not None and fill.color is not None:
            frame.outline_color = xaml_color_literal(context, fill.color)

    return frame


_LAYER_MAPPERS = {
    "text": (xaml_label, render_label),
    "image": (xaml_image, render_image),
    "frame": (xaml_frame, render_frame),
}


def layer_record(context, selected_layer: Layer):
    mapper, _ = _LAYER_MAPPERS[selected_layer.kind]
    return mapper(context, selected_layer)


def layer(context, selected_layer: Layer) -> dict:
    _, render = _LAYER_MAPPERS[selected_layer.kind]
    return xaml_code(render(layer_record(context, selected_layer)))
