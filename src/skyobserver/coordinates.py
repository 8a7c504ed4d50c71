"""Angle normalization and coordinate-frame transforms.

Conventions:
  - Right ascension in hours [0, 24), everything else in degrees.
  - Azimuth measured from North through East (N=0, E=90, S=180, W=270).
  - Hour angle H = LST − RA, signed in (−180, 180], positive west of the meridian.
"""

import math

from skyobserver.errors import InvalidInputError
from skyobserver.models import EquatorialPosition, HorizontalPosition

# Below this, both atan2 arguments are treated as zero (zenith/nadir).
_DEGENERATE_EPS = 1e-12


def normalize_degrees(angle: float) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = angle % 360.0
    # -1e-17 % 360.0 == 360.0 in floating point
    return 0.0 if wrapped >= 360.0 else wrapped


def normalize_signed_degrees(angle: float) -> float:
    """Wrap an angle into (−180, 180]."""
    wrapped = normalize_degrees(angle)
    return wrapped - 360.0 if wrapped > 180.0 else wrapped


def normalize_hours(hours: float) -> float:
    """Wrap an hour angle / right ascension into [0, 24)."""
    wrapped = hours % 24.0
    return 0.0 if wrapped >= 24.0 else wrapped


def validate_observer(latitude: float, longitude: float) -> None:
    """Reject non-finite or out-of-range geodetic coordinates.

    Raises:
        InvalidInputError: Latitude outside [-90, 90] or longitude outside [-180, 180].
    """
    for label, value in (("latitude", latitude), ("longitude", longitude)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError(f"{label} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidInputError(f"{label} must be finite, got {value!r}")
    if not -90.0 <= latitude <= 90.0:
        raise InvalidInputError(f"latitude out of range [-90, 90]: {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise InvalidInputError(f"longitude out of range [-180, 180]: {longitude}")


def hour_angle(lst: float, ra_hours: float) -> float:
    """Local hour angle in degrees, (−180, 180]."""
    return normalize_signed_degrees(lst - ra_hours * 15.0)


def equatorial_to_horizontal(
    ra_hours: float, dec: float, lst: float, latitude: float
) -> HorizontalPosition:
    """Transform equatorial coordinates to azimuth/altitude.

    Args:
        ra_hours: Right ascension (hours).
        dec: Declination (degrees).
        lst: Local sidereal time (degrees).
        latitude: Observer latitude (degrees).

    Returns:
        HorizontalPosition with azimuth in [0, 360) and altitude in [-90, 90].
        At the exact zenith/nadir the azimuth is undefined and reported as 0.
    """
    h = math.radians(hour_angle(lst, ra_hours))
    d = math.radians(dec)
    phi = math.radians(latitude)

    sin_alt = math.sin(d) * math.sin(phi) + math.cos(d) * math.cos(phi) * math.cos(h)
    altitude = math.degrees(math.asin(max(-1.0, min(1.0, sin_alt))))

    y = -math.sin(h) * math.cos(d)
    x = math.cos(phi) * math.sin(d) - math.sin(phi) * math.cos(d) * math.cos(h)
    if abs(x) < _DEGENERATE_EPS and abs(y) < _DEGENERATE_EPS:
        azimuth = 0.0
    else:
        azimuth = normalize_degrees(math.degrees(math.atan2(y, x)))

    return HorizontalPosition(azimuth=azimuth, altitude=altitude)


def mean_obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic (degrees) at T Julian centuries from J2000."""
    return 23.439291 - 0.0130042 * t - 1.64e-7 * t * t + 5.04e-7 * t * t * t


def ecliptic_to_equatorial(
    longitude: float, latitude: float, obliquity: float
) -> EquatorialPosition:
    """Rotate ecliptic longitude/latitude (degrees) into RA (hours) / Dec (degrees)."""
    lam = math.radians(longitude)
    beta = math.radians(latitude)
    eps = math.radians(obliquity)

    ra = math.atan2(
        math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps), math.cos(lam)
    )
    sin_dec = (
        math.sin(beta) * math.cos(eps)
        + math.cos(beta) * math.sin(eps) * math.sin(lam)
    )
    dec = math.asin(max(-1.0, min(1.0, sin_dec)))
    return EquatorialPosition(
        ra=normalize_hours(math.degrees(ra) / 15.0), dec=math.degrees(dec)
    )
