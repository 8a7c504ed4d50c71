"""Greenwich and local mean sidereal time."""

from skyobserver.coordinates import normalize_degrees
from skyobserver.timescale import J2000, julian_centuries


def greenwich_mean_sidereal_time(jd: float) -> float:
    """GMST in degrees, [0, 360).

    Meeus eq. 12.4; good to a fraction of a second of time near the present,
    well within arcminute planning accuracy.
    """
    t = julian_centuries(jd)
    theta = (
        280.46061837
        + 360.98564736629 * (jd - J2000)
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )
    return normalize_degrees(theta)


def local_sidereal_time(jd: float, longitude: float) -> float:
    """LST in degrees, [0, 360). Longitude is east-positive."""
    return normalize_degrees(greenwich_mean_sidereal_time(jd) + longitude)
