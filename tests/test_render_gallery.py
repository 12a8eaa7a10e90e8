"""Tests for the gallery rendering script."""

import importlib.util
import sys
from pathlib import Path as FilePath

import pytest

ROOT = FilePath(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))


def load_script():
    spec = importlib.util.spec_from_file_location(
        "render_gallery", ROOT / "scripts" / "render_gallery.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRenderGalleryScript:
    """Test the command line entry point end to end."""

    def test_svg_gallery_with_frames(self, tmp_path, monkeypatch):
        """Every shape, the gradient and the transition frames are written."""
        script = load_script()
        monkeypatch.setattr(sys, "argv", [
            "render_gallery.py",
            "--output-dir", str(tmp_path),
            "--format", "svg",
            "--frames",
            "--seed", "1",
        ])

        assert script.main() == 0

        for name in ["arrow", "arc", "flower", "checkerboard", "spirograph", "trapezoid", "color_cycle"]:
            assert (tmp_path / f"{name}.svg").exists()
        assert len(list(tmp_path.glob("*.svg"))) == 7

        # 3 seconds at 30 fps, both ends included
        checkerboard_frames = sorted((tmp_path / "frames" / "checkerboard").glob("*.svg"))
        assert len(checkerboard_frames) == 91
        assert checkerboard_frames[0].name == "checkerboard_0000.svg"
        assert list((tmp_path / "frames" / "arrow").glob("*.svg"))
        assert list((tmp_path / "frames" / "trapezoid").glob("*.svg"))

    def test_without_frames(self, tmp_path, monkeypatch):
        script = load_script()
        monkeypatch.setattr(sys, "argv", [
            "render_gallery.py", "--output-dir", str(tmp_path), "--preset", "preview",
        ])

        assert script.main() == 0
        assert len(list(tmp_path.glob("*.svg"))) == 7
        assert not (tmp_path / "frames").exists()

    def test_unknown_format_rejected(self, tmp_path, monkeypatch):
        script = load_script()
        monkeypatch.setattr(sys, "argv", [
            "render_gallery.py", "--output-dir", str(tmp_path), "--format", "gif",
        ])

        with pytest.raises(SystemExit):
            script.main()
