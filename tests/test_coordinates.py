"""
Coordinate transform tests: normalization, observer validation, and
equatorial ↔ horizontal / ecliptic ↔ equatorial conversion.
"""

import math

import pytest

from skyobserver.coordinates import (
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
    hour_angle,
    mean_obliquity,
    normalize_degrees,
    normalize_hours,
    normalize_signed_degrees,
    validate_observer,
)
from skyobserver.errors import InvalidInputError


# ============================================================================
# Normalization
# ============================================================================

class TestNormalization:
    """Tests for angle wrapping helpers."""

    @pytest.mark.parametrize(
        "angle,expected",
        [(0.0, 0.0), (360.0, 0.0), (-90.0, 270.0), (725.0, 5.0), (-1e-17, 0.0)],
    )
    def test_normalize_degrees(self, angle, expected):
        result = normalize_degrees(angle)
        assert 0.0 <= result < 360.0
        assert result == pytest.approx(expected)

    @pytest.mark.parametrize(
        "angle,expected",
        [(180.0, 180.0), (-180.0, 180.0), (181.0, -179.0), (359.0, -1.0), (0.0, 0.0)],
    )
    def test_normalize_signed_degrees(self, angle, expected):
        assert normalize_signed_degrees(angle) == pytest.approx(expected)

    def test_normalize_hours(self):
        assert normalize_hours(25.5) == pytest.approx(1.5)
        assert normalize_hours(-0.5) == pytest.approx(23.5)
        assert normalize_hours(-1e-17) == 0.0


# ============================================================================
# Observer validation
# ============================================================================

class TestValidateObserver:
    """Tests for latitude/longitude validation."""

    @pytest.mark.parametrize(
        "lat,lon", [(90.0, 180.0), (-90.0, -180.0), (0, 0), (41.145, 27.408)]
    )
    def test_accepts_valid(self, lat, lon):
        validate_observer(lat, lon)

    @pytest.mark.parametrize(
        "lat,lon",
        [
            (90.0001, 0.0),
            (-91.0, 0.0),
            (0.0, 180.5),
            (0.0, -181.0),
            (float("nan"), 0.0),
            (0.0, float("inf")),
            ("41", 27.0),
            (True, 27.0),
            (None, 0.0),
        ],
    )
    def test_rejects_invalid(self, lat, lon):
        with pytest.raises(InvalidInputError):
            validate_observer(lat, lon)

    def test_error_is_value_error(self):
        """Callers catching ValueError also catch invalid input."""
        with pytest.raises(ValueError):
            validate_observer(100.0, 0.0)


# ============================================================================
# Equatorial → horizontal
# ============================================================================

class TestEquatorialToHorizontal:
    """Tests for the az/alt transform."""

    def test_hour_angle_sign(self):
        """Positive hour angle means west of the meridian."""
        assert hour_angle(30.0, 1.0) == pytest.approx(15.0)
        assert hour_angle(0.0, 1.0) == pytest.approx(-15.0)

    def test_meeus_example_13b(self):
        """Venus from Washington, 1987-04-10 19:21 UT (Meeus ex. 13.b)."""
        # Apparent sidereal time 8h34m56.853s, longitude 77°03'56" W
        lst = (8 + 34 / 60 + 56.853 / 3600) * 15.0 - (77 + 3 / 60 + 56 / 3600)
        ra = 23 + 9 / 60 + 16.641 / 3600
        dec = -(6 + 43 / 60 + 11.61 / 3600)
        pos = equatorial_to_horizontal(ra, dec, lst, 38 + 55 / 60 + 17 / 3600)
        # Meeus measures azimuth from the south: 68.0337° → 248.0337° from north
        assert pos.azimuth == pytest.approx(248.0337, abs=1e-3)
        assert pos.altitude == pytest.approx(15.1249, abs=1e-3)

    def test_on_meridian_south(self):
        """A star transiting south of the zenith sits at azimuth 180."""
        pos = equatorial_to_horizontal(6.0, 0.0, 90.0, 40.0)
        assert pos.azimuth == pytest.approx(180.0)
        assert pos.altitude == pytest.approx(50.0)

    def test_celestial_pole_altitude_equals_latitude(self):
        for lat in (-60.0, -10.0, 0.0, 41.145, 75.0):
            pole_dec = 90.0 if lat >= 0 else -90.0
            pos = equatorial_to_horizontal(3.0, pole_dec, 123.0, lat)
            assert pos.altitude == pytest.approx(abs(lat), abs=1e-9)

    def test_rising_in_the_east(self):
        """An equatorial star six hours before transit is on the east horizon."""
        pos = equatorial_to_horizontal(6.0, 0.0, 0.0, 41.0)
        assert pos.azimuth == pytest.approx(90.0)
        assert pos.altitude == pytest.approx(0.0, abs=1e-9)

    def test_zenith_azimuth_is_zero(self):
        """At the exact zenith the azimuth is undefined and reported as 0."""
        pos = equatorial_to_horizontal(2.0, 90.0, 30.0, 90.0)
        assert pos.altitude == pytest.approx(90.0)
        assert pos.azimuth == 0.0

    def test_nadir_azimuth_is_zero(self):
        pos = equatorial_to_horizontal(2.0, -90.0, 30.0, 90.0)
        assert pos.altitude == pytest.approx(-90.0)
        assert pos.azimuth == 0.0

    def test_ranges(self):
        for ra in (0.0, 5.5, 12.0, 23.99):
            for dec in (-90.0, -45.0, 0.0, 45.0, 90.0):
                for lst in (0.0, 100.0, 359.999):
                    for lat in (-90.0, -30.0, 0.0, 41.0, 90.0):
                        pos = equatorial_to_horizontal(ra, dec, lst, lat)
                        assert 0.0 <= pos.azimuth < 360.0
                        assert -90.0 <= pos.altitude <= 90.0

    def test_wraparound_continuity(self):
        """LST / RA just either side of 0h give nearly identical positions."""
        before = equatorial_to_horizontal(0.0, 20.0, 359.9999, 41.0)
        after = equatorial_to_horizontal(0.0, 20.0, 0.0001, 41.0)
        assert before.altitude == pytest.approx(after.altitude, abs=1e-3)
        assert abs(normalize_signed_degrees(before.azimuth - after.azimuth)) < 1e-2

        before = equatorial_to_horizontal(23.99999, 20.0, 200.0, 41.0)
        after = equatorial_to_horizontal(0.00001, 20.0, 200.0, 41.0)
        assert before.altitude == pytest.approx(after.altitude, abs=1e-3)
        assert abs(normalize_signed_degrees(before.azimuth - after.azimuth)) < 1e-2

    def test_azimuth_continuity_across_north(self):
        """North of the zenith, the meridian crossing runs azimuth 359.99° → 0.01°."""
        # RA 2h = 30°, dec 70° > lat 41°: upper culmination lies due north
        before = equatorial_to_horizontal(2.0, 70.0, 29.99, 41.0)
        after = equatorial_to_horizontal(2.0, 70.0, 30.01, 41.0)
        assert before.altitude == pytest.approx(61.0, abs=1e-3)
        assert after.altitude == pytest.approx(61.0, abs=1e-3)
        for pos in (before, after):
            assert min(pos.azimuth, 360.0 - pos.azimuth) < 0.1
        assert (before.azimuth > 180.0) != (after.azimuth > 180.0)
        assert abs(normalize_signed_degrees(before.azimuth - after.azimuth)) < 0.1


# ============================================================================
# Ecliptic → equatorial
# ============================================================================

class TestEclipticToEquatorial:
    """Tests for the ecliptic rotation."""

    def test_mean_obliquity_j2000(self):
        assert mean_obliquity(0.0) == pytest.approx(23.439291)

    def test_equinox_points(self):
        eps = mean_obliquity(0.0)
        vernal = ecliptic_to_equatorial(0.0, 0.0, eps)
        assert vernal.ra == pytest.approx(0.0, abs=1e-9)
        assert vernal.dec == pytest.approx(0.0, abs=1e-9)
        autumnal = ecliptic_to_equatorial(180.0, 0.0, eps)
        assert autumnal.ra == pytest.approx(12.0)

    def test_solstice_declination_equals_obliquity(self):
        eps = mean_obliquity(0.0)
        summer = ecliptic_to_equatorial(90.0, 0.0, eps)
        assert summer.ra == pytest.approx(6.0)
        assert summer.dec == pytest.approx(eps)

    def test_meeus_example_13a(self):
        """Pollux: λ=113.215630°, β=6.684170°, ε=23.4392911°.

        Expected α=116.328942°, δ=28.026183°.
        """
        pos = ecliptic_to_equatorial(113.215630, 6.684170, 23.4392911)
        assert pos.ra * 15.0 == pytest.approx(116.328942, abs=1e-5)
        assert pos.dec == pytest.approx(28.026183, abs=1e-5)

    def test_ra_range(self):
        for lon in range(0, 360, 15):
            pos = ecliptic_to_equatorial(float(lon), -5.0, 23.44)
            assert 0.0 <= pos.ra < 24.0
            assert math.isfinite(pos.dec)
