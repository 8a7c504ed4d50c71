"""Low-precision lunar ephemeris.

Truncated ELP-2000/82 series from Meeus, "Astronomical Algorithms" ch. 47:
the largest periodic terms in longitude, latitude and distance (equation of
center, evection, variation, annual equation, reduction to the ecliptic,
parallactic inequality, ...). Accuracy is a few arcminutes in longitude.
"""

import math

from skyobserver.coordinates import (
    ecliptic_to_equatorial,
    mean_obliquity,
    normalize_degrees,
)
from skyobserver.models import LunarPosition
from skyobserver.solar import sun_position

EARTH_EQUATORIAL_RADIUS_KM = 6378.14
MEAN_DISTANCE_KM = 385000.56

# (D, M, M', F, longitude coeff [1e-6 deg], distance coeff [1e-3 km])
_LONGITUDE_DISTANCE_TERMS: tuple[tuple[int, int, int, int, int, int], ...] = (
    (0, 0, 1, 0, 6288774, -20905355),
    (2, 0, -1, 0, 1274027, -3699111),
    (2, 0, 0, 0, 658314, -2955968),
    (0, 0, 2, 0, 213618, -569925),
    (0, 1, 0, 0, -185116, 48888),
    (0, 0, 0, 2, -114332, -3149),
    (2, 0, -2, 0, 58793, 246158),
    (2, -1, -1, 0, 57066, -152138),
    (2, 0, 1, 0, 53322, -170733),
    (2, -1, 0, 0, 45758, -204586),
    (0, 1, -1, 0, -40923, -129620),
    (1, 0, 0, 0, -34720, 108743),
    (0, 1, 1, 0, -30383, 104755),
    (2, 0, 0, -2, 15327, 10321),
    (0, 0, 1, 2, -12528, 0),
    (0, 0, 1, -2, 10980, 79661),
    (4, 0, -1, 0, 10675, -34782),
    (0, 0, 3, 0, 10034, -23210),
    (4, 0, -2, 0, 8548, -21636),
    (2, 1, -1, 0, -7888, 24208),
    (2, 1, 0, 0, -6766, 30824),
    (1, 0, -1, 0, -5163, -8379),
    (1, 1, 0, 0, 4987, -16675),
    (2, -1, 1, 0, 4036, -12831),
    (2, 0, 2, 0, 3994, -10445),
    (4, 0, 0, 0, 3861, -11650),
    (2, 0, -3, 0, 3665, 14403),
    (0, 1, -2, 0, -2689, -7003),
    (2, 0, -1, 2, -2602, 0),
    (2, -1, -2, 0, 2390, 10056),
    (1, 0, 1, 0, -2348, 6322),
    (2, -2, 0, 0, 2236, -9884),
)

# (D, M, M', F, latitude coeff [1e-6 deg])
_LATITUDE_TERMS: tuple[tuple[int, int, int, int, int], ...] = (
    (0, 0, 0, 1, 5128122),
    (0, 0, 1, 1, 280602),
    (0, 0, 1, -1, 277693),
    (2, 0, 0, -1, 173237),
    (2, 0, -1, 1, 55413),
    (2, 0, -1, -1, 46271),
    (2, 0, 0, 1, 32573),
    (0, 0, 2, 1, 17198),
    (2, 0, 1, -1, 9266),
    (0, 0, 2, -1, 8822),
    (2, -1, 0, -1, 8216),
    (2, 0, -2, -1, 4324),
    (2, 0, 1, 1, 4200),
    (2, 1, 0, -1, -3359),
    (2, -1, -1, 1, 2463),
    (2, -1, 0, 1, 2211),
    (2, -1, -1, -1, 2065),
    (0, 1, -1, -1, -1870),
    (4, 0, -1, -1, 1828),
    (0, 1, 0, 1, -1794),
)


def _eccentricity_factor(m_multiple: int, e: float) -> float:
    # Terms involving the Sun's anomaly shrink as Earth's orbit circularizes
    return e ** abs(m_multiple)


def moon_position(t: float) -> LunarPosition:
    """Apparent geocentric position of the Moon at T Julian centuries from J2000.0.

    Args:
        t: Julian centuries since J2000.0.

    Returns:
        LunarPosition with ecliptic coordinates, distance, horizontal parallax,
        equatorial coordinates of date and elongation from the Sun.
    """
    mean_longitude = normalize_degrees(
        218.3164477 + 481267.88123421 * t - 0.0015786 * t * t
    )
    elongation_arg = normalize_degrees(
        297.8501921 + 445267.1114034 * t - 0.0018819 * t * t
    )
    sun_anomaly = normalize_degrees(357.5291092 + 35999.0502909 * t - 0.0001536 * t * t)
    moon_anomaly = normalize_degrees(
        134.9633964 + 477198.8675055 * t + 0.0087414 * t * t
    )
    latitude_arg = normalize_degrees(
        93.2720950 + 483202.0175233 * t - 0.0036539 * t * t
    )
    e = 1.0 - 0.002516 * t - 0.0000074 * t * t

    d, m, mp, f = (
        math.radians(x)
        for x in (elongation_arg, sun_anomaly, moon_anomaly, latitude_arg)
    )

    sum_l = 0.0
    sum_r = 0.0
    for cd, cm, cmp, cf, coeff_l, coeff_r in _LONGITUDE_DISTANCE_TERMS:
        arg = cd * d + cm * m + cmp * mp + cf * f
        factor = _eccentricity_factor(cm, e)
        sum_l += coeff_l * factor * math.sin(arg)
        sum_r += coeff_r * factor * math.cos(arg)

    sum_b = 0.0
    for cd, cm, cmp, cf, coeff_b in _LATITUDE_TERMS:
        arg = cd * d + cm * m + cmp * mp + cf * f
        sum_b += coeff_b * _eccentricity_factor(cm, e) * math.sin(arg)

    # Venus, Jupiter and flattening corrections
    a1 = math.radians(119.75 + 131.849 * t)
    a2 = math.radians(53.09 + 479264.290 * t)
    a3 = math.radians(313.45 + 481266.484 * t)
    lp = math.radians(mean_longitude)
    sum_l += 3958 * math.sin(a1) + 1962 * math.sin(lp - f) + 318 * math.sin(a2)
    sum_b += (
        -2235 * math.sin(lp)
        + 382 * math.sin(a3)
        + 175 * math.sin(a1 - f)
        + 175 * math.sin(a1 + f)
        + 127 * math.sin(lp - mp)
        - 115 * math.sin(lp + mp)
    )

    omega = math.radians(125.04452 - 1934.136261 * t)
    nutation = -0.004778 * math.sin(omega)

    longitude = normalize_degrees(mean_longitude + sum_l / 1e6 + nutation)
    latitude = sum_b / 1e6
    distance = MEAN_DISTANCE_KM + sum_r / 1000.0
    parallax = math.degrees(math.asin(EARTH_EQUATORIAL_RADIUS_KM / distance))
    obliquity = mean_obliquity(t) + 0.00256 * math.cos(omega)

    sun = sun_position(t)
    return LunarPosition(
        longitude=longitude,
        latitude=latitude,
        distance_km=distance,
        parallax=parallax,
        elongation=normalize_degrees(longitude - sun.longitude),
        equatorial=ecliptic_to_equatorial(longitude, latitude, obliquity),
    )


def moon_magnitude(elongation: float) -> float:
    """Approximate visual magnitude of the Moon from its elongation.

    Uses the phase angle ≈ 180° − elongation and the Allen phase curve.
    """
    separation = 180.0 - abs(180.0 - normalize_degrees(elongation))
    phase_angle = 180.0 - separation
    return -12.73 + 0.026 * phase_angle + 4e-9 * phase_angle**4
