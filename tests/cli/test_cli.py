"""
Tests for the golquery command line
"""

import json

import pytest

from golquery.cli import main


@pytest.fixture(autouse=True)
def fake_default_engine(engine, monkeypatch):
    """Route the CLI's default engine to the in-memory one"""
    monkeypatch.setattr("golquery.store.handle.default_engine", lambda: engine)


MONTREAL = ["--bbox", "-73.9781", "45.4042", "-73.4766", "45.7042"]


class TestQueryCommand:
    """Test `golquery query`"""

    def test_table_output(self, gol_file, capsys):
        code = main(["query", str(gol_file), "na[amenity=restaurant]", *MONTREAL])

        out = capsys.readouterr().out
        assert code == 0
        assert "Found 1 features" in out
        assert "Le Bistro" in out
        assert "cuisine: french" in out

    def test_json_output(self, gol_file, capsys):
        code = main(["query", str(gol_file), "w[highway]", *MONTREAL, "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data[0]["kind"] == "way"
        assert [n["id"] for n in data[0]["nodes"]] == [1001, 1002, 1003]

    def test_center_and_radius(self, gol_file, capsys):
        code = main(
            ["query", str(gol_file), "n[amenity=cafe]", "--center", "-73.60", "45.52", "--radius", "0.001"]
        )

        assert code == 0
        assert "Cafe Luna" in capsys.readouterr().out

    def test_limit(self, gol_file, capsys):
        main(["query", str(gol_file), "n[amenity]", *MONTREAL, "--limit", "1"])

        out = capsys.readouterr().out
        assert "Found 3 features" in out
        assert "... and 2 more" in out

    def test_gol_from_environment(self, gol_file, monkeypatch, capsys):
        monkeypatch.setenv("GOLQUERY_GOL_PATH", str(gol_file))

        code = main(["query", "n[amenity=cafe]", *MONTREAL])

        assert code == 0
        assert "Cafe Luna" in capsys.readouterr().out

    def test_no_gol(self, capsys):
        code = main(["query", "n[amenity=cafe]", *MONTREAL])

        assert code == 1
        assert "GOLQUERY_GOL_PATH" in capsys.readouterr().out

    def test_invalid_radius_setting(self, gol_file, monkeypatch, capsys):
        monkeypatch.setenv("GOLQUERY_DEFAULT_RADIUS", "wide")

        code = main(["query", str(gol_file), "n", "--bbox", "0", "0", "1", "1"])

        assert code == 1
        assert "Error: GOLQUERY_DEFAULT_RADIUS must be a number" in capsys.readouterr().out

    def test_missing_gol(self, tmp_path, capsys):
        code = main(["query", str(tmp_path / "missing.gol"), "n", *MONTREAL])

        assert code == 1
        assert "Error: GOL file not found" in capsys.readouterr().out

    def test_bad_filter(self, gol_file, capsys):
        code = main(["query", str(gol_file), "n[amenity", *MONTREAL])

        assert code == 1
        assert "Error: Query failed" in capsys.readouterr().out

    def test_output_parquet(self, gol_file, tmp_path, capsys):
        out_path = tmp_path / "amenities.parquet"

        code = main(["query", str(gol_file), "n[amenity]", *MONTREAL, "-o", str(out_path)])

        assert code == 0
        assert out_path.exists()
        assert f"Wrote 3 features to {out_path}" in capsys.readouterr().out


class TestInfoCommand:
    """Test `golquery info`"""

    def test_info(self, gol_file, capsys):
        code = main(["info", str(gol_file)])

        out = capsys.readouterr().out
        assert code == 0
        assert "Engine: fake" in out
        assert "Status: OK" in out

    def test_info_invalid_file(self, tmp_path, capsys):
        path = tmp_path / "bogus.gol"
        path.write_bytes(b"nope")

        code = main(["info", str(path)])

        assert code == 1
        assert "Cannot open" in capsys.readouterr().out

    def test_info_missing(self, tmp_path, capsys):
        assert main(["info", str(tmp_path / "missing.gol")]) == 1


def test_no_command(capsys):
    assert main([]) == 1
