"""Data model definitions.

Frozen dataclasses mark the boundaries between input, engine and caller layers.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    place: str  # City name from the built-in list, or a free-form address
    when: str  # "YYYY-MM-DD HH:MM" local civil time


@dataclass(frozen=True)
class City:
    """Named observing site. Owned by the caller; the engine only reads it."""

    name: str
    latitude: float  # Decimal degrees, north positive
    longitude: float  # Decimal degrees, east positive


@dataclass(frozen=True)
class ObserverContext:
    """Resolved location + UTC instant. Input to sky computation."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)
    utc_dt: datetime  # UTC datetime (with tzinfo=utc)
    address_display: str  # City name or normalized geocoder address


@dataclass(frozen=True)
class StarCoordinate:
    """Catalog position of a fixed star, epoch J2000.0."""

    ra: float  # Right ascension (hours, [0, 24))
    dec: float  # Declination (degrees, [-90, 90])


@dataclass(frozen=True)
class ConstellationCatalogEntry:
    """Stick figure of one constellation as pairs of star coordinates."""

    name: str
    lines: tuple[tuple[StarCoordinate, StarCoordinate], ...]


@dataclass(frozen=True)
class EquatorialPosition:
    """Apparent geocentric equatorial coordinates."""

    ra: float  # Right ascension (hours, [0, 24))
    dec: float  # Declination (degrees)


@dataclass(frozen=True)
class HorizontalPosition:
    """Observer-relative sky position."""

    azimuth: float  # Degrees, [0, 360), 0=N, 90=E
    altitude: float  # Degrees, [-90, 90], 0=horizon


@dataclass(frozen=True)
class SolarPosition:
    """Low-precision solar ephemeris result."""

    longitude: float  # True ecliptic longitude (degrees)
    distance_au: float  # Earth–Sun distance (AU)
    equatorial: EquatorialPosition


@dataclass(frozen=True)
class LunarPosition:
    """Low-precision lunar ephemeris result."""

    longitude: float  # Ecliptic longitude (degrees)
    latitude: float  # Ecliptic latitude (degrees)
    distance_km: float  # Earth–Moon distance (km)
    parallax: float  # Equatorial horizontal parallax (degrees)
    elongation: float  # Moon − Sun ecliptic longitude, [0, 360)
    equatorial: EquatorialPosition


@dataclass(frozen=True)
class PlanetPosition:
    """Geocentric position and brightness of a planet."""

    name: str
    heliocentric_distance: float  # r (AU)
    geocentric_distance: float  # Δ (AU)
    phase_angle: float  # Sun–planet–Earth angle (degrees)
    magnitude: float  # Apparent visual magnitude
    equatorial: EquatorialPosition


class BodyType(str, Enum):
    SUN = "sun"
    MOON = "moon"
    PLANET = "planet"
    STAR = "star"


@dataclass(frozen=True)
class CelestialBody:
    """A body's sky position at one instant. Recomputed on every query."""

    name: str
    type: BodyType
    azimuth: float  # Degrees, [0, 360)
    altitude: float  # Degrees, [-90, 90]; negative = below horizon
    distance: float  # AU for sun/planets, km for the moon
    magnitude: float  # Apparent visual magnitude
    color: str  # Hex color hint for display layers


@dataclass(frozen=True)
class ConstellationLineState:
    """One projected constellation segment."""

    from_: HorizontalPosition
    to: HorizontalPosition


@dataclass(frozen=True)
class ConstellationState:
    """All projected segments of a named constellation."""

    name: str
    lines: tuple[ConstellationLineState, ...]


@dataclass(frozen=True)
class MoonData:
    """Lunar phase summary."""

    phase_name: str
    illumination: float  # Illuminated fraction, [0, 1]
    age: float  # Days since new moon, [0, synodic month)
    emoji: str
    phase_index: int  # 0 = new … 4 = full … 7 = waning crescent
    elongation: float  # Moon − Sun ecliptic longitude (degrees)


@dataclass(frozen=True)
class MeteorShower:
    """Annual meteor shower window. Dates are (month, day) pairs."""

    name: str
    start: tuple[int, int]
    end: tuple[int, int]
    peak: tuple[int, int]

    @property
    def wraps_year(self) -> bool:
        """True when the window runs across December 31 → January 1."""
        return self.start > self.end


@dataclass(frozen=True)
class ShowerMatch:
    """A shower whose window contains the queried date."""

    shower: MeteorShower
    on: date
    is_peak: bool


@dataclass(frozen=True)
class SkySnapshot:
    """Everything computed for one (time, place) query."""

    context: ObserverContext
    bodies: tuple[CelestialBody, ...]
    constellations: tuple[ConstellationState, ...]
    moon: MoonData
    events: tuple[str, ...]
    upcoming: tuple[str, ...] = ()  # Shower peaks in the coming weeks

    def body_names(self) -> tuple[str, ...]:
        return tuple(b.name for b in self.bodies)

    def find_body(self, name: str) -> CelestialBody | None:
        """Look up a body by name (case-insensitive), e.g. for tracking."""
        key = name.casefold()
        for body in self.bodies:
            if body.name.casefold() == key:
                return body
        return None

    def visible_bodies(self) -> tuple[CelestialBody, ...]:
        """Bodies above the horizon. Filtering is a caller-side convenience."""
        return tuple(b for b in self.bodies if b.altitude >= 0)
