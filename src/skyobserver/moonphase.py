"""Lunar phase from Sun–Moon elongation."""

import math

from skyobserver.coordinates import normalize_degrees
from skyobserver.i18n import t
from skyobserver.models import MoonData

SYNODIC_MONTH = 29.530588853  # days
PHASE_COUNT = 8
PHASE_WIDTH = 360.0 / PHASE_COUNT

PHASE_EMOJI = ("🌑", "🌒", "🌓", "🌔", "🌕", "🌖", "🌗", "🌘")


def phase_index(elongation: float) -> int:
    """Bucket an elongation into one of eight phases.

    Buckets are 45° wide and centred on the principal phases (new at 0°,
    first quarter at 90°, full at 180°, ...). A value on a boundary belongs
    to the higher bucket; 337.5° wraps back to new moon.
    """
    shifted = normalize_degrees(elongation + PHASE_WIDTH / 2)
    return int(shifted // PHASE_WIDTH) % PHASE_COUNT


def moon_phase_from_elongation(elongation: float, lang: str = "en") -> MoonData:
    """Build MoonData from the Moon − Sun ecliptic longitude difference.

    Args:
        elongation: Degrees; any real value, wrapped into [0, 360).
        lang: Language for the phase name.
    """
    elongation = normalize_degrees(elongation)
    illumination = (1.0 - math.cos(math.radians(elongation))) / 2.0
    age = elongation / 360.0 * SYNODIC_MONTH
    index = phase_index(elongation)
    return MoonData(
        phase_name=t(f"moon_phase_{index}", lang),
        illumination=max(0.0, min(1.0, illumination)),
        age=min(age, math.nextafter(SYNODIC_MONTH, 0.0)),
        emoji=PHASE_EMOJI[index],
        phase_index=index,
        elongation=elongation,
    )
