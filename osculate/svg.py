"""
Heart image rendering for Osculate.

Every token is drawn as the same outlined heart.  Two things change when a
token is kissed: the heartbeat speeds up (animation duration) and the
outline picks up colour (HSL saturation).  Everything else is fixed, so the
template below only has two moving parts.
"""

from dataclasses import dataclass

from osculate.config import (
    HEART_HUE,
    HEART_LIGHTNESS,
    IMAGE_SIZE,
    KISSED_DURATION,
    KISSED_SATURATION,
    UNKISSED_DURATION,
    UNKISSED_SATURATION,
)


@dataclass(frozen=True)
class HeartbeatStyle:
    """The state-dependent visual parameters of a heart."""

    duration: str  # Seconds per beat, written verbatim into dur='...'
    saturation: int  # Percent

    @property
    def stroke(self) -> str:
        return f"hsl({HEART_HUE},{self.saturation}%,{HEART_LIGHTNESS}%,1)"


def heartbeat_style(kissed: bool) -> HeartbeatStyle:
    if kissed:
        return HeartbeatStyle(duration=KISSED_DURATION, saturation=KISSED_SATURATION)
    return HeartbeatStyle(duration=UNKISSED_DURATION, saturation=UNKISSED_SATURATION)


# Single-quoted attributes keep the document embeddable in a JSON string.
# The heartbeat animation must stay the first element carrying dur='...'.
_SVG_TEMPLATE = (
    "<svg xmlns='http://www.w3.org/2000/svg' width='{size}' height='{size}' "
    "viewBox='0 0 400 400'>"
    "<rect width='400' height='400' fill='black'/>"
    "<g transform='translate(200 215)'>"
    "<g>"
    "<animateTransform attributeName='transform' type='scale' "
    "values='1;1.12;1;1.06;1' dur='{duration}' repeatCount='indefinite'/>"
    "<path d='M0,-55 C-25,-110 -125,-95 -115,-20 C-108,35 -40,75 0,115 "
    "C40,75 108,35 115,-20 C125,-95 25,-110 0,-55 Z' fill='none' "
    "stroke='{stroke}' stroke-width='8' stroke-linejoin='round'/>"
    "</g>"
    "</g>"
    "</svg>"
)


def format_svg(style: HeartbeatStyle) -> str:
    """Fill the heart template with the given style."""
    return _SVG_TEMPLATE.format(
        size=IMAGE_SIZE,
        duration=style.duration,
        stroke=style.stroke,
    )


def render_svg(kissed: bool) -> str:
    """Render the complete SVG document for a token's kissed state."""
    return format_svg(heartbeat_style(kissed))
