"""Naked-eye planet positions from mean Keplerian elements.

Elements and secular rates are the JPL "approximate positions of the planets"
set (Standish), valid 1800–2050 to a few arcminutes for the inner planets.
Positions are computed heliocentrically for the planet and the Earth–Moon
barycentre, differenced, precessed to the equinox of date and rotated to
equatorial coordinates.
"""

import math
from dataclasses import dataclass

from skyobserver.coordinates import (
    ecliptic_to_equatorial,
    mean_obliquity,
    normalize_degrees,
    normalize_signed_degrees,
)
from skyobserver.errors import InvalidInputError, NonConvergenceError
from skyobserver.models import PlanetPosition

KEPLER_MAX_ITERATIONS = 30
KEPLER_TOLERANCE = 1e-10  # radians
GENERAL_PRECESSION_PER_CENTURY = 1.3969713  # degrees of ecliptic longitude

NAKED_EYE_PLANETS = ("Mercury", "Venus", "Mars", "Jupiter", "Saturn")


@dataclass(frozen=True)
class OrbitalElements:
    """Mean elements at J2000.0 and their rates per Julian century.

    Units: a in AU, angles in degrees.
    """

    a: float
    a_rate: float
    e: float
    e_rate: float
    i: float  # Inclination
    i_rate: float
    L: float  # Mean longitude
    L_rate: float
    peri: float  # Longitude of perihelion (ϖ)
    peri_rate: float
    node: float  # Longitude of ascending node (Ω)
    node_rate: float

    def at(self, t: float) -> "OrbitalElements":
        """Elements propagated to T Julian centuries from J2000.0 (rates zeroed)."""
        return OrbitalElements(
            a=self.a + self.a_rate * t,
            a_rate=0.0,
            e=self.e + self.e_rate * t,
            e_rate=0.0,
            i=self.i + self.i_rate * t,
            i_rate=0.0,
            L=self.L + self.L_rate * t,
            L_rate=0.0,
            peri=self.peri + self.peri_rate * t,
            peri_rate=0.0,
            node=self.node + self.node_rate * t,
            node_rate=0.0,
        )


ORBITAL_ELEMENTS: dict[str, OrbitalElements] = {
    "Mercury": OrbitalElements(
        0.38709927, 0.00000037,
        0.20563593, 0.00001906,
        7.00497902, -0.00594749,
        252.25032350, 149472.67411175,
        77.45779628, 0.16047689,
        48.33076593, -0.12534081,
    ),
    "Venus": OrbitalElements(
        0.72333566, 0.00000390,
        0.00677672, -0.00004107,
        3.39467605, -0.00078890,
        181.97909950, 58517.81538729,
        131.60246718, 0.00268329,
        76.67984255, -0.27769418,
    ),
    "Earth": OrbitalElements(
        1.00000261, 0.00000562,
        0.01671123, -0.00004392,
        -0.00001531, -0.01294668,
        100.46457166, 35999.37244981,
        102.93768193, 0.32327364,
        0.0, 0.0,
    ),
    "Mars": OrbitalElements(
        1.52371034, 0.00001847,
        0.09339410, 0.00007882,
        1.84969142, -0.00813131,
        -4.55343205, 19140.30268499,
        -23.94362959, 0.44441088,
        49.55953891, -0.29257343,
    ),
    "Jupiter": OrbitalElements(
        5.20288700, -0.00011607,
        0.04838624, -0.00013253,
        1.30439695, -0.00183714,
        34.39644051, 3034.74612775,
        14.72847983, 0.21252668,
        100.47390909, 0.20469106,
    ),
    "Saturn": OrbitalElements(
        9.53667594, -0.00125060,
        0.05386179, -0.00050991,
        2.48599187, 0.00193609,
        49.95424423, 1222.49362201,
        92.59887831, -0.41897216,
        113.66242448, -0.28867794,
    ),
}


def solve_kepler(
    mean_anomaly: float,
    e: float,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
    tolerance: float = KEPLER_TOLERANCE,
) -> float:
    """Solve Kepler's equation M = E − e·sin E by Newton iteration.

    Args:
        mean_anomaly: M in radians.
        e: Eccentricity, 0 ≤ e < 1.
        max_iterations: Iteration budget.
        tolerance: Stop once the Newton step is below this (radians).

    Returns:
        Eccentric anomaly E in radians.

    Raises:
        InvalidInputError: If the orbit is not elliptical.
        NonConvergenceError: If the budget runs out before the step drops
            below ``tolerance``.
    """
    if not 0.0 <= e < 1.0:
        raise InvalidInputError(f"eccentricity must be in [0, 1), got {e}")

    big_e = mean_anomaly + e * math.sin(mean_anomaly)
    step = math.inf
    for _ in range(max_iterations):
        residual = mean_anomaly - big_e + e * math.sin(big_e)
        step = residual / (1.0 - e * math.cos(big_e))
        big_e += step
        if abs(step) < tolerance:
            return big_e
    raise NonConvergenceError(
        f"Kepler solver did not converge in {max_iterations} iterations (e={e})",
        iterations=max_iterations,
        residual=abs(step),
    )


def heliocentric_ecliptic(
    elements: OrbitalElements, t: float
) -> tuple[float, float, float]:
    """Heliocentric (x, y, z) in AU, ecliptic and equinox of J2000.0."""
    el = elements.at(t)
    mean_anomaly = math.radians(normalize_signed_degrees(el.L - el.peri))
    big_e = solve_kepler(mean_anomaly, el.e)

    x_orb = el.a * (math.cos(big_e) - el.e)
    y_orb = el.a * math.sqrt(1.0 - el.e * el.e) * math.sin(big_e)

    w = math.radians(el.peri - el.node)
    node = math.radians(el.node)
    inc = math.radians(el.i)
    cw, sw = math.cos(w), math.sin(w)
    cn, sn = math.cos(node), math.sin(node)
    ci, si = math.cos(inc), math.sin(inc)

    x = (cw * cn - sw * sn * ci) * x_orb + (-sw * cn - cw * sn * ci) * y_orb
    y = (cw * sn + sw * cn * ci) * x_orb + (-sw * sn + cw * cn * ci) * y_orb
    z = (sw * si) * x_orb + (cw * si) * y_orb
    return x, y, z


def _saturn_ring_tilt(longitude: float, latitude: float, t: float) -> float:
    """Saturnicentric latitude of the Earth, B (degrees). Meeus ch. 45."""
    inc = math.radians(28.075216 - 0.012998 * t + 0.000004 * t * t)
    node = math.radians(169.508470 + 1.394681 * t + 0.000412 * t * t)
    lam = math.radians(longitude)
    beta = math.radians(latitude)
    sin_b = (
        math.sin(inc) * math.cos(beta) * math.sin(lam - node)
        - math.cos(inc) * math.sin(beta)
    )
    return math.degrees(math.asin(max(-1.0, min(1.0, sin_b))))


def apparent_magnitude(
    name: str, r: float, delta: float, phase_angle: float, ring_tilt: float = 0.0
) -> float:
    """Visual magnitude from Astronomical Almanac style empirical formulas.

    Args:
        name: Planet name.
        r: Heliocentric distance (AU).
        delta: Geocentric distance (AU).
        phase_angle: Sun–planet–Earth angle (degrees).
        ring_tilt: Saturn only, the ring-plane tilt B (degrees).
    """
    i = phase_angle
    distance_term = 5.0 * math.log10(r * delta)
    if name == "Mercury":
        return -0.42 + distance_term + 0.0380 * i - 0.000273 * i**2 + 0.000002 * i**3
    if name == "Venus":
        return -4.40 + distance_term + 0.0009 * i + 0.000239 * i**2 - 0.00000065 * i**3
    if name == "Mars":
        return -1.52 + distance_term + 0.016 * i
    if name == "Jupiter":
        return -9.40 + distance_term + 0.005 * i
    if name == "Saturn":
        sin_b = math.sin(math.radians(abs(ring_tilt)))
        return -8.88 + distance_term - 2.60 * sin_b + 1.25 * sin_b * sin_b
    raise InvalidInputError(f"no magnitude model for {name!r}")


def planet_position(name: str, t: float) -> PlanetPosition:
    """Geocentric apparent position and magnitude of a planet.

    Args:
        name: One of ``NAKED_EYE_PLANETS``.
        t: Julian centuries since J2000.0.

    Raises:
        InvalidInputError: Unknown planet name.
        NonConvergenceError: Propagated from ``solve_kepler``.
    """
    if name not in NAKED_EYE_PLANETS:
        raise InvalidInputError(f"unknown planet: {name!r}")

    xp, yp, zp = heliocentric_ecliptic(ORBITAL_ELEMENTS[name], t)
    xe, ye, ze = heliocentric_ecliptic(ORBITAL_ELEMENTS["Earth"], t)
    dx, dy, dz = xp - xe, yp - ye, zp - ze

    r = math.sqrt(xp * xp + yp * yp + zp * zp)
    earth_sun = math.sqrt(xe * xe + ye * ye + ze * ze)
    delta = math.sqrt(dx * dx + dy * dy + dz * dz)

    cos_phase = (r * r + delta * delta - earth_sun * earth_sun) / (2.0 * r * delta)
    phase_angle = math.degrees(math.acos(max(-1.0, min(1.0, cos_phase))))

    longitude = normalize_degrees(
        math.degrees(math.atan2(dy, dx)) + GENERAL_PRECESSION_PER_CENTURY * t
    )
    latitude = math.degrees(math.asin(max(-1.0, min(1.0, dz / delta))))

    ring_tilt = _saturn_ring_tilt(longitude, latitude, t) if name == "Saturn" else 0.0

    return PlanetPosition(
        name=name,
        heliocentric_distance=r,
        geocentric_distance=delta,
        phase_angle=phase_angle,
        magnitude=apparent_magnitude(name, r, delta, phase_angle, ring_tilt),
        equatorial=ecliptic_to_equatorial(longitude, latitude, mean_obliquity(t)),
    )
