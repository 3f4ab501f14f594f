"""Tests for frame rendering."""

import inspect

from jfa_voronoi import display, ppm
from jfa_voronoi.display import displayDiagram, frameRecorder
from jfa_voronoi.flood import JFAVoronoiDiagram


class TestDisplay:

    def test_display_saves_frame(self, single_seed_grid, tmp_path):
        path = displayDiagram(0, single_seed_grid, tmp_path)
        assert path == tmp_path / "voronoi_frame_0.png"
        assert path.read_bytes()[:4] == b"\x89PNG"

    def test_recorder_creates_directory(self, single_seed_grid, tmp_path):
        directory = tmp_path / "nested" / "frames"
        JFAVoronoiDiagram(single_seed_grid, on_pass=frameRecorder(directory))
        assert sorted(p.name for p in directory.iterdir()) == [
            f"voronoi_frame_{i}.png" for i in range(1, 6)]

    def test_show_opens_window(self, single_seed_grid, tmp_path, monkeypatch):
        shown = []
        monkeypatch.setattr(display.plt, "show", lambda: shown.append(True))

        displayDiagram(1, single_seed_grid, tmp_path, show=True)
        displayDiagram(2, single_seed_grid, tmp_path)

        assert shown == [True]

    def test_import_leaves_backend_alone(self):
        for module in (display, ppm):
            assert "matplotlib.use" not in inspect.getsource(module)
