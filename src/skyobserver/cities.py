"""Built-in observing sites and observation-log suggestion lists."""

import unicodedata

from skyobserver.coordinates import validate_observer
from skyobserver.models import City, SkySnapshot

THRACE_CITIES: tuple[City, ...] = (
    City(name="Çorlu", latitude=41.1450, longitude=27.4081),
    City(name="Tekirdağ", latitude=40.3667, longitude=27.4833),
    City(name="Edirne", latitude=41.1357, longitude=26.5561),
    City(name="Keşan", latitude=41.3500, longitude=26.4167),
    City(name="Lüleburgaz", latitude=41.4167, longitude=27.3667),
    City(name="Babaeski", latitude=41.5000, longitude=27.0167),
)

COMMON_DEEP_SKY_OBJECTS: tuple[str, ...] = (
    "Andromeda Galaxy (M31)",
    "Orion Nebula (M42)",
    "Pleiades (M45)",
    "Milky Way Core",
    "International Space Station (ISS)",
    "Starlink Satellites",
    "Meteor",
    "Corona Borealis",
)


def _fold(name: str) -> str:
    """Case- and diacritic-insensitive key ("Tekirdağ" == "tekirdag")."""
    text = name.strip().casefold().replace("ı", "i")
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def find_city(name: str, cities: tuple[City, ...] = THRACE_CITIES) -> City | None:
    """Look up a built-in city by name, ignoring case and diacritics."""
    key = _fold(name)
    for city in cities:
        if _fold(city.name) == key:
            return city
    return None


def custom_city(latitude: float, longitude: float, label: str = "My Location") -> City:
    """City entry for an arbitrary coordinate pair, named after its coordinates.

    Raises:
        InvalidInputError: Out-of-range coordinates.
    """
    validate_observer(latitude, longitude)
    return City(
        name=f"{label} ({latitude:.2f}, {longitude:.2f})",
        latitude=latitude,
        longitude=longitude,
    )


def suggestion_names(snapshot: SkySnapshot | None = None) -> list[str]:
    """Sorted, de-duplicated object names for observation-log autocomplete.

    Merges the snapshot's bodies and constellations with the common
    deep-sky list.
    """
    names: list[str] = list(COMMON_DEEP_SKY_OBJECTS)
    if snapshot is not None:
        names += [b.name for b in snapshot.bodies]
        names += [c.name for c in snapshot.constellations]
    return sorted(set(names))
