"""Integration tests for the epicycle command line."""

import pytest
from PIL import Image, ImageDraw
from typer.testing import CliRunner

from epicycle import __version__
from epicycle.cli.app import app

runner = CliRunner()

SMALL_RUN = [
    "--downscale-w",
    "100",
    "--order",
    "8",
    "--samples",
    "512",
    "--draw-samples",
    "1024",
    "--width",
    "300",
    "--height",
    "200",
]


@pytest.fixture
def silhouette(tmp_path):
    path = tmp_path / "disk.png"
    image = Image.new("RGB", (200, 200), "white")
    ImageDraw.Draw(image).ellipse((40, 40, 160, 160), fill="black")
    image.save(path)
    return path


class TestTraceCommand:
    """Tests for the trace command."""

    def test_writes_png(self, silhouette, tmp_path):
        output = tmp_path / "out.png"

        result = runner.invoke(app, [str(silhouette), *SMALL_RUN, "-q", "-o", str(output)])

        assert result.exit_code == 0, result.output
        with Image.open(output) as rendered:
            assert rendered.size == (300, 200)

    def test_lists_epicycles(self, silhouette):
        result = runner.invoke(app, [str(silhouette), *SMALL_RUN, "--top", "3"])

        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        assert "more" in result.output

    def test_log_file(self, silhouette, tmp_path):
        log_file = tmp_path / "run.log"

        result = runner.invoke(
            app, [str(silhouette), *SMALL_RUN, "-q", "--log-file", str(log_file)]
        )

        assert result.exit_code == 0, result.output
        assert "Stage complete" in log_file.read_text(encoding="utf-8")

    def test_blank_image(self, tmp_path):
        blank = tmp_path / "blank.png"
        Image.new("RGB", (100, 100), "white").save(blank)

        result = runner.invoke(app, [str(blank), *SMALL_RUN, "-q"])

        assert result.exit_code == 1
        assert "Could not find a clear shape" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.png"), "-q"])

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "notes.png"
        path.write_text("hello", encoding="utf-8")

        result = runner.invoke(app, [str(path), "-q"])

        assert result.exit_code == 1
        output = result.output.replace("\n", "")
        assert "Invalid image" in output
        assert "notes.png" in output

    def test_verbose_shows_stage_timings(self, silhouette):
        result = runner.invoke(app, [str(silhouette), *SMALL_RUN, "-v", "--top", "0"])

        assert result.exit_code == 0, result.output
        assert "synthesize" in result.output
        assert "slowest stage" in result.output

    def test_log_level_is_case_insensitive(self, silhouette):
        result = runner.invoke(app, [str(silhouette), *SMALL_RUN, "-q", "--log-level", "error"])
        assert result.exit_code == 0, result.output

    def test_unknown_log_level(self, silhouette):
        result = runner.invoke(app, [str(silhouette), "--log-level", "LOUD"])

        assert result.exit_code == 2
        assert not isinstance(result.exception, AttributeError)

    def test_verbose_and_quiet_conflict(self, silhouette):
        result = runner.invoke(app, [str(silhouette), "-v", "-q"])
        assert result.exit_code == 1

    def test_order_must_be_positive(self, silhouette):
        result = runner.invoke(app, [str(silhouette), "--order", "0"])
        assert result.exit_code == 2

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
