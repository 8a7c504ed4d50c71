"""Low-precision solar ephemeris.

Meeus, "Astronomical Algorithms" ch. 25 (geometric mean elements with a
two-term equation of center). Accuracy ~0.01°, enough for sunrise/sunset
and twilight planning, not for eclipse prediction.
"""

import math

from skyobserver.coordinates import (
    ecliptic_to_equatorial,
    mean_obliquity,
    normalize_degrees,
)
from skyobserver.models import SolarPosition


def sun_mean_anomaly(t: float) -> float:
    """Mean anomaly of the Sun (degrees, [0, 360))."""
    return normalize_degrees(357.52911 + 35999.05029 * t - 0.0001537 * t * t)


def sun_mean_longitude(t: float) -> float:
    """Geometric mean longitude of the Sun (degrees, [0, 360))."""
    return normalize_degrees(280.46646 + 36000.76983 * t + 0.0003032 * t * t)


def sun_position(t: float) -> SolarPosition:
    """Apparent position of the Sun at T Julian centuries from J2000.0.

    Args:
        t: Julian centuries since J2000.0.

    Returns:
        SolarPosition with apparent ecliptic longitude, distance (AU) and
        equatorial coordinates of date.
    """
    l0 = sun_mean_longitude(t)
    m = math.radians(sun_mean_anomaly(t))
    e = 0.016708634 - 0.000042037 * t - 0.0000001267 * t * t

    center = (1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(m) + (
        0.019993 - 0.000101 * t
    ) * math.sin(2 * m)
    true_longitude = l0 + center
    true_anomaly = math.radians(math.degrees(m) + center)
    distance = 1.000001018 * (1 - e * e) / (1 + e * math.cos(true_anomaly))

    # Nutation in longitude and aberration, first-order terms
    omega = math.radians(125.04 - 1934.136 * t)
    apparent_longitude = normalize_degrees(
        true_longitude - 0.00569 - 0.00478 * math.sin(omega)
    )
    obliquity = mean_obliquity(t) + 0.00256 * math.cos(omega)

    return SolarPosition(
        longitude=apparent_longitude,
        distance_au=distance,
        equatorial=ecliptic_to_equatorial(apparent_longitude, 0.0, obliquity),
    )
