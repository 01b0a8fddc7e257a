"""Color model and pairwise harmony rules for deterministic outfit scoring."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Iterable, Tuple

logger = logging.getLogger(__name__)

NEUTRAL_SATURATION_MAX = 12
NEUTRAL_LIGHTNESS_HIGH = 85
NEUTRAL_LIGHTNESS_LOW = 15
BEIGE_HUE_RANGE = (30, 60)
BEIGE_SATURATION_MAX = 40

COMPLEMENTARY_RANGE = (150, 210)
ANALOGOUS_MAX_DISTANCE = 30
CONTRAST_DARK_MAX = 30
CONTRAST_LIGHT_MIN = 70

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class HSL:
    """A color as hue (degrees), saturation and lightness (percentages)."""

    hue: float
    saturation: float
    lightness: float

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> "HSL":
        hue, saturation, lightness = list(values)
        return cls(hue=hue, saturation=saturation, lightness=lightness)

    def as_list(self) -> list:
        return [self.hue, self.saturation, self.lightness]

    def __str__(self) -> str:
        return f"hsl({self.hue:g}, {self.saturation:g}%, {self.lightness:g}%)"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""

    return int(math.floor(value + 0.5))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Render 0-255 channels as a lowercase ``#rrggbb`` string."""

    return "#{:02x}{:02x}{:02x}".format(int(r), int(g), int(b))


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """Parse ``#rrggbb``, ``rrggbb`` or ``#rgb`` into 0-255 channels."""

    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid hex color '{value}'")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert a sampled 0-255 RGB color into whole-number HSL.

    The hue comes from the dominant channel's sector of the color wheel; all
    three components are rounded half-up.
    """

    red, green, blue = r / 255, g / 255, b / 255
    high = max(red, green, blue)
    low = min(red, green, blue)
    lightness = (high + low) / 2

    if high == low:
        hue = saturation = 0.0
    else:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)
        if high == red:
            hue = (green - blue) / delta + (6 if green < blue else 0)
        elif high == green:
            hue = (blue - red) / delta + 2
        else:
            hue = (red - green) / delta + 4
        hue /= 6

    return HSL(
        hue=round_half_up(hue * 360) % 360,
        saturation=round_half_up(saturation * 100),
        lightness=round_half_up(lightness * 100),
    )


def is_neutral(hsl: HSL) -> bool:
    """Return True for grays, near-black, near-white and muted tan/beige."""

    if hsl.saturation < NEUTRAL_SATURATION_MAX:
        return True
    if hsl.lightness > NEUTRAL_LIGHTNESS_HIGH or hsl.lightness < NEUTRAL_LIGHTNESS_LOW:
        return True
    low, high = BEIGE_HUE_RANGE
    return low <= hsl.hue <= high and hsl.saturation < BEIGE_SATURATION_MAX


def hue_distance(h1: float, h2: float) -> float:
    """Minimal angular distance between two hues on the 360 degree wheel."""

    diff = abs(h1 - h2)
    return min(diff, 360 - diff)


def is_complementary(distance: float) -> bool:
    low, high = COMPLEMENTARY_RANGE
    return low <= distance <= high


def is_analogous(distance: float) -> bool:
    return distance <= ANALOGOUS_MAX_DISTANCE


def is_high_contrast(hsl_a: HSL, hsl_b: HSL) -> bool:
    """Return True when one color is dark and the other light."""

    return (hsl_a.lightness < CONTRAST_DARK_MAX and hsl_b.lightness > CONTRAST_LIGHT_MIN) or (
        hsl_b.lightness < CONTRAST_DARK_MAX and hsl_a.lightness > CONTRAST_LIGHT_MIN
    )


def harmony_score(hsl_a: HSL, hsl_b: HSL, is_formal: bool) -> float:
    """Score how well two colors pair under the given style context.

    Complementary hues earn 2, otherwise analogous hues earn 1. A light/dark
    contrast adds 1, and in a formal context a neutral member adds 1.
    """

    score = 0.0
    distance = hue_distance(hsl_a.hue, hsl_b.hue)
    if is_complementary(distance):
        score += 2
    elif is_analogous(distance):
        score += 1

    if is_high_contrast(hsl_a, hsl_b):
        score += 1

    if is_formal and (is_neutral(hsl_a) or is_neutral(hsl_b)):
        score += 1

    logger.debug("harmony %s vs %s formal=%s -> %s", hsl_a, hsl_b, is_formal, score)
    return score


__all__ = [
    "HSL",
    "round_half_up",
    "rgb_to_hex",
    "hex_to_rgb",
    "rgb_to_hsl",
    "is_neutral",
    "hue_distance",
    "is_complementary",
    "is_analogous",
    "is_high_contrast",
    "harmony_score",
]
