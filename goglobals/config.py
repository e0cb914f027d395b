"""Configuration management."""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any
from pathlib import Path
import fnmatch
import os
import logging

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json", "excel")

# directories the Go toolchain itself ignores for package builds
SKIPPED_DIRECTORIES = {"vendor", "testdata"}


@dataclass
class Config:
    """Application settings."""

    # directories searched for .go files
    source_directories: List[str] = field(default_factory=list)

    # glob patterns matched against file paths to skip
    exclude_patterns: List[str] = field(default_factory=list)

    # scan *_test.go files as well
    include_tests: bool = False

    # processing
    max_workers: int = 4

    # output
    output_format: str = "text"
    output_file: Optional[str] = None

    # logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_yaml(cls, file_path: str) -> "Config":
        """Load settings from a YAML file.

        Args:
            file_path: Path to the YAML config file

        Returns:
            Config instance
        """
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        config = cls.from_dict(data)

        # environment wins over the file
        config.log_level = os.getenv("GOGLOBALS_LOG_LEVEL", config.log_level)

        logger.info(f"Configuration loaded from {file_path}")
        return config

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create settings from a dictionary, ignoring unknown keys.

        Args:
            data: Settings dictionary

        Returns:
            Config instance
        """
        config = cls()

        for key, value in data.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                logger.warning(f"Unknown configuration key: {key}")

        return config

    def validate(self) -> List[str]:
        """Validate the settings.

        Returns:
            List of validation errors (empty when valid)
        """
        errors = []

        for path in self.source_directories:
            if not Path(path).exists():
                errors.append(f"Source directory does not exist: {path}")

        if not isinstance(self.max_workers, int) or self.max_workers < 1:
            errors.append(f"max_workers must be a positive integer: {self.max_workers}")

        if self.output_format not in OUTPUT_FORMATS:
            errors.append(
                f"Unknown output_format '{self.output_format}' "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )

        if self.output_format == "excel" and not self.output_file:
            errors.append("output_file is required for excel output")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert the settings to a dictionary.

        Returns:
            Settings as a dictionary
        """
        return {
            "source_directories": self.source_directories,
            "exclude_patterns": self.exclude_patterns,
            "include_tests": self.include_tests,
            "max_workers": self.max_workers,
            "output_format": self.output_format,
            "output_file": self.output_file,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    def is_excluded(self, path: Path) -> bool:
        """Check whether a file is filtered out of the scan.

        Args:
            path: Path of a .go file

        Returns:
            True if the file should be skipped
        """
        if not self.include_tests and path.name.endswith("_test.go"):
            return True
        if SKIPPED_DIRECTORIES.intersection(path.parts[:-1]):
            return True

        posix = path.as_posix()
        return any(fnmatch.fnmatch(posix, pattern) for pattern in self.exclude_patterns)

    def get_source_files(self, paths: Optional[List[str]] = None) -> List[str]:
        """Collect the Go files to scan.

        Args:
            paths: Files or directories to use instead of source_directories

        Returns:
            Sorted list of .go file paths
        """
        source_files = set()

        for entry in paths if paths is not None else self.source_directories:
            path = Path(entry)
            if path.is_file():
                # explicitly named files are never filtered
                if path.suffix == ".go":
                    source_files.add(str(path))
                continue
            if not path.exists():
                logger.warning(f"Path does not exist: {entry}")
                continue
            for f in path.rglob("*.go"):
                if f.is_file() and not self.is_excluded(f.relative_to(path)):
                    source_files.add(str(f))

        logger.debug(f"Found {len(source_files)} source files")
        return sorted(source_files)

    def save_yaml(self, file_path: str) -> None:
        """Save the settings to a YAML file.

        Args:
            file_path: Destination path
        """
        output_path = Path(file_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        data = self.to_dict()
        if not self.log_file:
            data.pop("log_file")
        if not self.output_file:
            data.pop("output_file")

        with open(file_path, "w", encoding="utf-8") as f:
            yaml.dump(
                data,
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False
            )

        logger.info(f"Configuration saved to {file_path}")
