"""End-to-end tests for the demo driver."""
import os
import subprocess
import sys
from pathlib import Path

from oop_patterns.demo import main, run_phones_demo, run_shapes_demo

EXPECTED_OUTPUT = """\
Draw Square!
Draw Circle!
Manufacturer: Nokia
Smarphone: Nokia Smartphone
Basic phone: Nokia Basic Phone
Manufacturer: Samsung
Smarphone: Samsung Smartphone
Basic phone: Samsung Basic Phone
Manufacturer: HTC
Smarphone: HTC Smartphone
Basic phone: HTC Basic Phone
"""

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestMain:
    """Test the full program run."""

    def test_default_output(self, capsys):
        assert main() == 0
        assert capsys.readouterr().out == EXPECTED_OUTPUT

    def test_ignores_environment_and_dotenv(self, monkeypatch, tmp_path, capsys):
        (tmp_path / ".env").write_text("OOP_PATTERNS_DEMOS=phones\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("OOP_PATTERNS_DEMOS", "x")

        assert main() == 0
        assert capsys.readouterr().out == EXPECTED_OUTPUT

    def test_run_as_module(self, tmp_path):
        (tmp_path / ".env").write_text("OOP_PATTERNS_DEMOS=phones\n")
        pythonpath = os.pathsep.join(filter(None, [str(PROJECT_ROOT), os.environ.get("PYTHONPATH")]))

        result = subprocess.run(
            [sys.executable, "-m", "oop_patterns"],
            capture_output=True,
            text=True,
            cwd=tmp_path,
            encoding="utf-8",
            env={**os.environ, "PYTHONPATH": pythonpath},
        )

        assert result.returncode == 0
        assert result.stdout == EXPECTED_OUTPUT


class TestShapesDemo:
    """Test the shape demo on its own."""

    def test_output(self, capsys):
        run_shapes_demo()

        assert capsys.readouterr().out == "Draw Square!\nDraw Circle!\n"


class TestPhonesDemo:
    """Test the phone factory demo on its own."""

    def test_three_lines_per_manufacturer(self, capsys):
        run_phones_demo()

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 9
        assert lines[0::3] == ["Manufacturer: Nokia", "Manufacturer: Samsung", "Manufacturer: HTC"]
