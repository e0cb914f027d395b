"""Tests for configuration handling."""

from pathlib import Path
from tempfile import TemporaryDirectory

from goglobals.config import Config


class TestConfigDefaults:
    """Tests for default values."""

    def test_default_values(self):
        config = Config()
        assert config.source_directories == []
        assert config.exclude_patterns == []
        assert config.include_tests is False
        assert config.max_workers == 4
        assert config.output_format == "text"
        assert config.output_file is None
        assert config.log_level == "INFO"
        assert config.validate() == []


class TestConfigYaml:
    """Tests for YAML loading and saving."""

    def test_round_trip(self):
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "config.yaml"
            config = Config(
                source_directories=[tmpdir],
                exclude_patterns=["gen/*"],
                include_tests=True,
                max_workers=8,
                output_format="json",
            )
            config.save_yaml(str(path))

            loaded = Config.from_yaml(str(path))
            assert loaded.to_dict() == config.to_dict()

    def test_unknown_keys_ignored(self):
        config = Config.from_dict({"max_workers": 2, "colour": "blue"})
        assert config.max_workers == 2
        assert not hasattr(config, "colour")

    def test_empty_file(self):
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "empty.yaml"
            path.write_text("")
            assert Config.from_yaml(str(path)).to_dict() == Config().to_dict()

    def test_env_overrides_log_level(self, monkeypatch):
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text("log_level: INFO\n")
            monkeypatch.setenv("GOGLOBALS_LOG_LEVEL", "DEBUG")

            assert Config.from_yaml(str(path)).log_level == "DEBUG"


class TestConfigValidate:
    """Tests for validation."""

    def test_missing_directory(self):
        errors = Config(source_directories=["/nonexistent/go/src"]).validate()
        assert len(errors) == 1
        assert "/nonexistent/go/src" in errors[0]

    def test_bad_workers_and_format(self):
        errors = Config(max_workers=0, output_format="xml").validate()
        assert len(errors) == 2

    def test_excel_requires_output_file(self):
        assert Config(output_format="excel").validate()
        assert Config(output_format="excel", output_file="out.xlsx").validate() == []


class TestSourceFiles:
    """Tests for Go file discovery."""

    def _make_tree(self, root: Path) -> None:
        for rel_path in [
            "main.go",
            "main_test.go",
            "README.md",
            "internal/a.go",
            "vendor/lib/lib.go",
            "internal/testdata/fixture.go",
            "gen/generated.go",
        ]:
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("package x\n")
        (root / "odd.go").mkdir()

    def test_discovery_filters(self):
        with TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            self._make_tree(root)

            files = Config().get_source_files([tmpdir])
            rel = sorted(Path(f).relative_to(root).as_posix() for f in files)

            assert rel == ["gen/generated.go", "internal/a.go", "main.go"]

    def test_include_tests_and_excludes(self):
        with TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            self._make_tree(root)

            config = Config(include_tests=True, exclude_patterns=["gen/*"])
            rel = sorted(
                Path(f).relative_to(root).as_posix()
                for f in config.get_source_files([tmpdir])
            )

            assert rel == ["internal/a.go", "main.go", "main_test.go"]

    def test_explicit_file(self):
        with TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            self._make_tree(root)

            target = str(root / "vendor" / "lib" / "lib.go")
            assert Config().get_source_files([target]) == [target]
            assert Config().get_source_files([str(root / "README.md")]) == []
