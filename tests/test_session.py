"""Tests for PlotSession."""

from pathlib import Path

from script import PlotConfig
from session import PlotSession


class TestPlotSession:
    def test_close_removes_data_files(self, tmp_path):
        with PlotSession(directory=tmp_path, keep=False) as session:
            array = session.array([[1, 2], [3, 4]])
            assert Path(array.source).parent == tmp_path
            func = session.function(lambda x: x + 1, (0, 1, 1))
            assert Path(array.source).exists()
            assert Path(func.source).read_text(encoding="utf-8") == "0 1\n1 2"
        assert not Path(array.source).exists()
        assert not Path(func.source).exists()
        assert session.registry.closed

    def test_expression_and_file_write_nothing(self, tmp_path):
        with PlotSession(directory=tmp_path, keep=False) as session:
            session.expression("sin(x)")
            session.file(tmp_path / "d.dat")
            assert len(session.registry) == 0

    def test_plot_uses_session_registry(self, tmp_path, fake_gnuplot):
        with PlotSession(directory=tmp_path, keep=False) as session:
            config = PlotConfig(data=[session.array([[1, 2], [3, 4]], title="pts")])
            result = session.plot(config, tmp_path / "out.png")
            assert result.success
            script_path = Path(fake_gnuplot.calls[0][1])
            assert script_path.parent == tmp_path
            assert not script_path.exists()
            assert len(session.registry) == 1

    def test_splot(self, tmp_path, fake_gnuplot):
        with PlotSession(directory=tmp_path, keep=False) as session:
            config = PlotConfig(data=[session.expression("x*y")])
            session.splot(config, tmp_path / "out.png")
        assert fake_gnuplot.scripts[0].splitlines()[-1] == 'splot x*y w l lt 1 lw 2 t ""'
