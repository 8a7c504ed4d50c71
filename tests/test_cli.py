"""
Command-line interface tests.
"""

import pytest

from skyobserver import cli
from skyobserver.compute import GeocodingError

CORLU_ARGS = ["--lat", "41.145", "--lon", "27.408"]


@pytest.fixture(autouse=True)
def _isolated_env(clean_env, monkeypatch, tmp_path):
    # keep load_dotenv() from picking up a developer's .env
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "load_dotenv", lambda: False)


class TestReport:
    """Tests for the text report."""

    def test_coordinates_report(self, capsys):
        code = cli.main(CORLU_ARGS + ["--when", "2024-08-12 20:30"])
        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("Sky over My Location (")
        assert "at 2024-08-12 20:30 UTC" in out.splitlines()[0]
        for label in (
            "Bodies",
            "Saturn",
            "Constellations",
            "Moon:",
            "Sky events",
            "Perseids",
        ):
            assert label in out
        assert "below horizon" in out  # the Sun at local midnight

    def test_named_coordinates(self, capsys):
        cli.main(CORLU_ARGS + ["Backyard", "--when", "2024-08-12 20:30"])
        assert "Sky over Backyard" in capsys.readouterr().out

    def test_turkish_report(self, capsys):
        code = cli.main(CORLU_ARGS + ["--when", "2024-01-25 17:54", "--lang", "tr"])
        out = capsys.readouterr().out
        assert code == 0
        assert "gökyüzü" in out
        assert "Dolunay" in out
        assert "Güneş" in out

    def test_no_events(self, capsys):
        cli.main(CORLU_ARGS + ["--when", "2024-02-12 20:00"])
        out = capsys.readouterr().out
        assert "No meteor showers active." in out
        assert "No shower peaks in the next 30 days." in out

    def test_upcoming_peaks_section(self, capsys):
        assert cli.main(CORLU_ARGS + ["--when", "2024-08-01 20:00"]) == 0
        out = capsys.readouterr().out
        assert "Upcoming peaks (next 30 days)" in out
        assert "  Perseids peaks on 2024-08-12 (in 11 days)" in out
        assert out.index("Sky events") < out.index("Upcoming peaks")

    def test_language_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("SKYOBSERVER_LANG", "tr")
        cli.main(CORLU_ARGS + ["--when", "2024-08-12 20:30"])
        assert "Gök cisimleri" in capsys.readouterr().out

    def test_default_city_from_environment(self, capsys, monkeypatch):
        captured = {}

        def fake_resolve(place, user_agent):
            captured["place"] = place
            return 41.6772, 26.5557, "Edirne"

        monkeypatch.setenv("SKYOBSERVER_CITY", "Edirne")
        monkeypatch.setattr(cli, "resolve_location", fake_resolve)
        assert cli.main([]) == 0
        assert captured["place"] == "Edirne"
        assert "Sky over Edirne" in capsys.readouterr().out


class TestShowerLookup:
    """--shower prints one shower's window and next peak."""

    def test_shower_summary(self, capsys):
        assert cli.main(["--shower", "perseids", "--when", "2024-09-01 20:00"]) == 0
        out = capsys.readouterr().out
        assert out.strip() == "Perseids: active 07-17 – 08-24, next peak 2025-08-12"

    def test_shower_needs_no_location(self, capsys, monkeypatch):
        def fail(place, user_agent):
            raise AssertionError("location lookup not expected")

        monkeypatch.setattr(cli, "resolve_location", fail)
        assert cli.main(["--shower", "Geminids", "--lang", "tr"]) == 0
        assert "Geminids: aktif 12-04 – 12-17" in capsys.readouterr().out

    def test_unknown_shower(self, capsys):
        assert cli.main(["--shower", "Draconids"]) == 2
        assert "Unknown meteor shower: Draconids" in capsys.readouterr().err

    def test_shower_bad_time(self, capsys):
        assert cli.main(["--shower", "Lyrids", "--when", "soon"]) == 2
        assert "Invalid input" in capsys.readouterr().err


class TestErrors:
    """Tests for exit codes and error messages."""

    def test_invalid_latitude(self, capsys):
        code = cli.main(["--lat", "95", "--lon", "27", "--when", "2024-08-12 20:30"])
        assert code == 2
        assert "Invalid input" in capsys.readouterr().err

    def test_malformed_time(self, capsys):
        code = cli.main(CORLU_ARGS + ["--when", "tomorrow night"])
        assert code == 2
        assert "Invalid input" in capsys.readouterr().err

    def test_geocoding_failure(self, capsys, monkeypatch):
        def not_found(place, user_agent):
            raise GeocodingError(f"Address not found: {place}")

        monkeypatch.setattr(cli, "resolve_location", not_found)
        assert cli.main(["Atlantis"]) == 1
        assert "Location not found" in capsys.readouterr().err

    def test_bad_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("SKYOBSERVER_REFRESH_SECONDS", "soon")
        assert cli.main(CORLU_ARGS) == 2
        assert "SKYOBSERVER_REFRESH_SECONDS" in capsys.readouterr().err

    def test_lat_without_lon(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--lat", "41.0"])
        assert exc_info.value.code == 2

    def test_unknown_language(self):
        with pytest.raises(SystemExit):
            cli.main(CORLU_ARGS + ["--lang", "de"])


class TestWatch:
    """--watch hands the resolved context to SkyRefresher."""

    def test_watch_uses_refresh_interval(self, capsys, monkeypatch):
        seen = {}

        def fake_watch(context, follow_clock, lang, interval):
            seen.update(
                context=context, follow_clock=follow_clock, lang=lang, interval=interval
            )

        monkeypatch.setenv("SKYOBSERVER_REFRESH_SECONDS", "120")
        monkeypatch.setattr(cli, "_watch", fake_watch)
        assert cli.main(CORLU_ARGS + ["--watch"]) == 0
        assert seen["interval"] == 120.0
        assert seen["follow_clock"] is True
        assert seen["lang"] == "en"
        assert seen["context"].lat == 41.145

    def test_watch_loop_prints_reports(self, capsys, monkeypatch):
        class OneShotRefresher:
            def __init__(self, compute, on_update, interval_sec):
                self.compute, self.on_update = compute, on_update

            async def run_forever(self):
                self.on_update(self.compute())

        monkeypatch.setattr(cli, "SkyRefresher", OneShotRefresher)
        assert cli.main(CORLU_ARGS + ["--when", "2024-08-12 20:30", "--watch"]) == 0
        out = capsys.readouterr().out
        assert "Refreshing every 300s" in out
        assert "Perseids" in out
