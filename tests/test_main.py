"""Tests for the command line entry point."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory

from goglobals.main import EXIT_CLEAN, EXIT_ERROR, EXIT_FINDINGS, main


SOURCE = (
    "package main\n"
    "\n"
    'import "regexp"\n'
    "\n"
    "var Registry = map[string]int{}\n"
    'var pattern = regexp.MustCompile("^a")\n'
)


class TestMain:
    """Tests for main()."""

    def test_findings_exit_code(self, capsys):
        with TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "main.go").write_text(SOURCE)

            code = main([tmpdir])

            out = capsys.readouterr().out
            assert code == EXIT_FINDINGS
            assert out.strip().endswith(
                "main.go:5:5: Registry is a global variable (gochecknoglobals)"
            )

    def test_clean_exit_code(self, capsys):
        with TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "main.go").write_text("package main\n\nconst X = 1\n")

            assert main([tmpdir]) == EXIT_CLEAN
            assert capsys.readouterr().out == ""

    def test_json_to_file(self):
        with TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "main.go").write_text(SOURCE)
            output = Path(tmpdir) / "report.json"

            code = main([tmpdir, "-f", "json", "-o", str(output), "-j", "2"])

            data = json.loads(output.read_text(encoding="utf-8"))
            assert code == EXIT_FINDINGS
            assert data["files_scanned"] == 1
            assert [f["message"] for f in data["findings"]] == [
                "Registry is a global variable"
            ]

    def test_config_file(self, capsys):
        with TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "src"
            src.mkdir()
            (src / "main.go").write_text(SOURCE)
            config = Path(tmpdir) / "goglobals.yaml"
            config.write_text(f"source_directories:\n  - {src.as_posix()}\nmax_workers: 1\n")

            assert main(["-c", str(config)]) == EXIT_FINDINGS
            assert "Registry" in capsys.readouterr().out

    def test_missing_config(self):
        assert main(["-c", "/nonexistent/goglobals.yaml", "."]) == EXIT_ERROR

    def test_invalid_config(self):
        with TemporaryDirectory() as tmpdir:
            assert main([tmpdir, "-j", "0"]) == EXIT_ERROR

    def test_excel_requires_output(self):
        with TemporaryDirectory() as tmpdir:
            assert main([tmpdir, "-f", "excel"]) == EXIT_ERROR
