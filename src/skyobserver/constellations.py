"""Constellation stick-figure catalog and its projection onto the observer's sky.

Star positions are J2000.0 (RA in hours, Dec in degrees), rounded to the
precision a naked-eye chart needs.
"""

from skyobserver.coordinates import equatorial_to_horizontal
from skyobserver.models import (
    ConstellationCatalogEntry,
    ConstellationLineState,
    ConstellationState,
    StarCoordinate,
)


def _entry(
    name: str, *lines: tuple[tuple[float, float], tuple[float, float]]
) -> ConstellationCatalogEntry:
    return ConstellationCatalogEntry(
        name=name,
        lines=tuple(
            (StarCoordinate(ra=a[0], dec=a[1]), StarCoordinate(ra=b[0], dec=b[1]))
            for a, b in lines
        ),
    )


# Named stars, (ra_hours, dec_deg)
_DUBHE = (11.06, 61.75)
_MERAK = (11.03, 56.38)
_PHECDA = (11.89, 53.69)
_MEGREZ = (12.25, 57.03)
_ALIOTH = (12.90, 55.95)
_MIZAR = (13.39, 54.92)
_ALKAID = (13.79, 49.31)

_CAPH = (0.15, 59.15)
_SCHEDAR = (0.67, 56.53)
_GAMMA_CAS = (0.93, 60.71)
_RUCHBAH = (1.43, 60.23)
_SEGIN = (1.90, 63.67)

_BETELGEUSE = (5.91, 7.40)
_BELLATRIX = (5.41, 6.34)
_ALNITAK = (5.67, -1.94)
_ALNILAM = (5.60, -1.20)
_MINTAKA = (5.53, -0.29)
_RIGEL = (5.24, -8.20)
_SAIPH = (5.79, -9.66)

_VEGA = (18.61, 38.78)
_SULAFAT = (18.83, 32.68)
_SHELIAK = (18.99, 32.55)
_DELTA_LYR = (19.28, 37.60)

_DENEB = (20.69, 45.28)
_SADR = (20.37, 40.26)
_ALBIREO = (19.51, 27.96)
_DELTA_CYG = (19.75, 45.12)
_EPSILON_CYG = (20.77, 33.97)

_POLARIS = (2.53, 89.26)
_YILDUN = (17.54, 86.59)
_EPSILON_UMI = (16.77, 82.04)
_ZETA_UMI = (15.73, 77.79)
_KOCHAB = (14.85, 74.16)
_PHERKAD = (15.35, 71.83)
_ETA_UMI = (16.29, 75.76)

_REGULUS = (10.14, 11.97)
_ETA_LEO = (10.12, 16.76)
_ALGIEBA = (10.33, 19.84)
_ADHAFERA = (10.28, 23.42)
_RASALAS = (9.88, 26.01)
_EPSILON_LEO = (9.76, 23.77)
_ZOSMA = (11.24, 20.52)
_DENEBOLA = (11.82, 14.57)
_CHERTAN = (11.24, 15.43)

_ACRAB = (16.09, -19.81)
_DSCHUBBA = (16.01, -22.62)
_PI_SCO = (15.98, -26.11)
_SIGMA_SCO = (16.35, -25.59)
_ANTARES = (16.49, -26.43)
_TAU_SCO = (16.60, -28.22)
_EPSILON_SCO = (16.84, -34.29)
_MU_SCO = (16.86, -38.05)
_ZETA_SCO = (16.91, -42.36)
_ETA_SCO = (17.20, -43.24)
_SARGAS = (17.62, -43.00)
_IOTA_SCO = (17.79, -40.13)
_KAPPA_SCO = (17.71, -39.03)
_SHAULA = (17.56, -37.10)

_ACRUX = (12.44, -63.10)
_GACRUX = (12.52, -57.11)
_MIMOSA = (12.80, -59.69)
_DELTA_CRU = (12.25, -58.75)


CONSTELLATIONS: tuple[ConstellationCatalogEntry, ...] = (
    _entry(
        "Ursa Major",
        (_DUBHE, _MERAK),
        (_MERAK, _PHECDA),
        (_PHECDA, _MEGREZ),
        (_MEGREZ, _DUBHE),
        (_MEGREZ, _ALIOTH),
        (_ALIOTH, _MIZAR),
        (_MIZAR, _ALKAID),
    ),
    _entry(
        "Cassiopeia",
        (_CAPH, _SCHEDAR),
        (_SCHEDAR, _GAMMA_CAS),
        (_GAMMA_CAS, _RUCHBAH),
        (_RUCHBAH, _SEGIN),
    ),
    _entry(
        "Orion",
        (_BETELGEUSE, _BELLATRIX),
        (_BETELGEUSE, _ALNITAK),
        (_RIGEL, _SAIPH),
        (_RIGEL, _MINTAKA),
        (_BELLATRIX, _MINTAKA),
        (_SAIPH, _ALNITAK),
        (_ALNITAK, _ALNILAM),
        (_ALNILAM, _MINTAKA),
    ),
    _entry(
        "Lyra",
        (_VEGA, _SULAFAT),
        (_SULAFAT, _SHELIAK),
        (_SHELIAK, _DELTA_LYR),
        (_DELTA_LYR, _VEGA),
    ),
    _entry(
        "Cygnus",
        (_DENEB, _SADR),
        (_SADR, _ALBIREO),
        (_SADR, _DELTA_CYG),
        (_SADR, _EPSILON_CYG),
    ),
    _entry(
        "Ursa Minor",
        (_POLARIS, _YILDUN),
        (_YILDUN, _EPSILON_UMI),
        (_EPSILON_UMI, _ZETA_UMI),
        (_ZETA_UMI, _KOCHAB),
        (_KOCHAB, _PHERKAD),
        (_PHERKAD, _ETA_UMI),
        (_ETA_UMI, _ZETA_UMI),
    ),
    _entry(
        "Leo",
        (_REGULUS, _ETA_LEO),
        (_ETA_LEO, _ALGIEBA),
        (_ALGIEBA, _ADHAFERA),
        (_ADHAFERA, _RASALAS),
        (_RASALAS, _EPSILON_LEO),
        (_ALGIEBA, _ZOSMA),
        (_ZOSMA, _DENEBOLA),
        (_DENEBOLA, _CHERTAN),
        (_CHERTAN, _REGULUS),
    ),
    _entry(
        "Scorpius",
        (_ACRAB, _DSCHUBBA),
        (_DSCHUBBA, _PI_SCO),
        (_DSCHUBBA, _SIGMA_SCO),
        (_SIGMA_SCO, _ANTARES),
        (_ANTARES, _TAU_SCO),
        (_TAU_SCO, _EPSILON_SCO),
        (_EPSILON_SCO, _MU_SCO),
        (_MU_SCO, _ZETA_SCO),
        (_ZETA_SCO, _ETA_SCO),
        (_ETA_SCO, _SARGAS),
        (_SARGAS, _IOTA_SCO),
        (_IOTA_SCO, _KAPPA_SCO),
        (_KAPPA_SCO, _SHAULA),
    ),
    _entry(
        "Crux",
        (_GACRUX, _ACRUX),
        (_MIMOSA, _DELTA_CRU),
    ),
)


def project_constellation(
    entry: ConstellationCatalogEntry, lst: float, latitude: float
) -> ConstellationState:
    """Project every segment endpoint of one constellation to az/alt."""
    lines = tuple(
        ConstellationLineState(
            from_=equatorial_to_horizontal(start.ra, start.dec, lst, latitude),
            to=equatorial_to_horizontal(end.ra, end.dec, lst, latitude),
        )
        for start, end in entry.lines
    )
    return ConstellationState(name=entry.name, lines=lines)
