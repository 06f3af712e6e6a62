"""NMFC (National Motor Freight Classification) density classes."""

import re
from typing import Optional, Tuple

NMFC_CLASSES = [
    "50", "55", "60", "65", "70", "77.5", "85", "92.5", "100",
    "110", "125", "150", "175", "200", "250", "300", "400", "500",
]

# (minimum density in lbs per cubic foot, class), densest first
DENSITY_BREAKS = [
    (50, "50"),
    (35, "55"),
    (30, "60"),
    (22.5, "65"),
    (15, "70"),
    (13.5, "77.5"),
    (12, "85"),
    (10.5, "92.5"),
    (9, "100"),
    (8, "110"),
    (7, "125"),
    (6, "150"),
    (5, "175"),
    (4, "200"),
    (3, "250"),
    (2, "300"),
    (1, "400"),
]

CUBIC_INCHES_PER_FOOT = 1728

_DIMENSIONS_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[xX×]\s*(\d+(?:\.\d+)?)\s*[xX×]\s*(\d+(?:\.\d+)?)\s*$")


def freight_class_for(weight: float, length: float, width: float, height: float) -> str:
    """
    Return the NMFC class for a piece of freight.

    Dimensions are in inches, weight in lbs. Missing or non-positive
    inputs fall back to class 50.
    """
    if not weight or not length or not width or not height or weight <= 0:
        return "50"

    cubic_feet = (length * width * height) / CUBIC_INCHES_PER_FOOT
    if cubic_feet <= 0:
        return "50"

    density = weight / cubic_feet
    for minimum, freight_class in DENSITY_BREAKS:
        if density >= minimum:
            return freight_class
    return "500"


def parse_dimensions(dimensions: Optional[str]) -> Optional[Tuple[float, float, float]]:
    """Parse a ``LxWxH`` label such as ``"48x40x48"``."""
    if not dimensions:
        return None
    match = _DIMENSIONS_RE.match(dimensions)
    if not match:
        return None
    return tuple(float(v) for v in match.groups())
