"""Tests for the render_plot command line entry point."""

import json

import pytest

from render_plot import PlotSpec, main


@pytest.fixture
def spec_file(tmp_path):
    def write(payload):
        path = tmp_path / "plot.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)
    return write


class TestPlotSpec:
    def test_series_payload_required(self):
        with pytest.raises(ValueError):
            PlotSpec.model_validate({"data": [{"kind": "array"}]})
        with pytest.raises(ValueError):
            PlotSpec.model_validate({"data": [{"kind": "file"}]})

    def test_option_values_keep_their_kind(self):
        spec = PlotSpec.model_validate({"options": {"grid": True, "samples": 200, "xlabel": "T"}, "data": []})
        assert spec.options == {"grid": True, "samples": 200, "xlabel": "T"}


class TestMain:
    def test_dry_run_prints_script(self, spec_file, tmp_path, capsys):
        path = spec_file({
            "options": {"xlabel": "Time", "grid": True},
            "data": [
                {"kind": "file", "source": "d.dat", "title": "series"},
                {"kind": "expression", "source": "sin(x)", "linetype": 4},
            ],
        })
        assert main([path, "--output", str(tmp_path / "out.png"), "--dry-run"]) == 0

        lines = capsys.readouterr().out.strip().splitlines()
        assert 'set xlabel "Time"' in lines
        assert "set grid" in lines
        assert lines[-1] == 'plot "d.dat" u 1:2 w l lt 1 lw 2 t "series", sin(x) w l lt 4 lw 2 t ""'

    def test_integer_width_matches_library_output(self, spec_file, tmp_path, capsys):
        path = spec_file({"data": [
            {"kind": "expression", "source": "x", "width": 2},
            {"kind": "expression", "source": "y", "width": 1.5},
        ]})
        assert main([path, "--output", str(tmp_path / "out.png"), "--dry-run"]) == 0

        last = capsys.readouterr().out.strip().splitlines()[-1]
        assert last == 'plot x w l lt 1 lw 2 t "", y w l lt 2 lw 1.5 t ""'

    def test_render(self, spec_file, tmp_path, fake_gnuplot, capsys):
        path = spec_file({"data": [{"kind": "array", "columns": [[1, 2, 3], [10, 20, 30]]}]})
        output = tmp_path / "out.svg"
        assert main([path, "-o", str(output), "--splot"]) == 0
        assert fake_gnuplot.scripts[0].splitlines()[-1].startswith("splot ")
        assert "Plot saved to" in capsys.readouterr().out

    def test_render_failure(self, spec_file, tmp_path, fake_gnuplot, capsys):
        fake_gnuplot.returncode = 1
        fake_gnuplot.stderr = "boom"
        path = spec_file({"data": [{"kind": "expression", "source": "x"}]})
        assert main([path, "-o", str(tmp_path / "out.png")]) == 1
        assert "gnuplot failed: boom" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert main([str(path), "-o", str(tmp_path / "out.png")]) == 2

    def test_configuration_error(self, spec_file, tmp_path, capsys):
        path = spec_file({"data": [{"kind": "array", "columns": [[1, 2], [1]]}]})
        assert main([path, "-o", str(tmp_path / "out.png")]) == 2
        assert "column length mismatch" in capsys.readouterr().err
