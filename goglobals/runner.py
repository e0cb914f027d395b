"""Parallel scanning of Go files and merging of their findings."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional
import logging
import threading

from .analyzer.declaration_scanner import DeclarationScanner
from .analyzer.go_parser import GoAnalyzer, GoParseError
from .config import Config
from .models.finding import Finding
from .utils.logger import ProgressLogger

logger = logging.getLogger(__name__)


class FindingCollector:
    """Shared sink for findings produced by concurrent scans.

    Each scan builds its own list and hands it over with submit(); the
    lock is held only while the list is appended.
    """

    def __init__(self):
        self._findings: List[Finding] = []
        self._lock = threading.Lock()

    def submit(self, findings: List[Finding]) -> None:
        """Append one file's findings to the shared collection.

        Args:
            findings: Findings of a single file, in declaration order
        """
        if not findings:
            return
        with self._lock:
            self._findings.extend(findings)

    def findings(self) -> List[Finding]:
        """Return a snapshot of everything submitted so far."""
        with self._lock:
            return list(self._findings)

    def __len__(self) -> int:
        with self._lock:
            return len(self._findings)


@dataclass
class RunStats:
    """Counters for one run."""
    files_scanned: int = 0
    findings: int = 0
    errors: int = 0
    failed_files: List[str] = field(default_factory=list)


class GlobalsChecker:
    """Scans a set of Go files for package-level variables."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize the checker.

        Args:
            config: Settings; defaults are used when omitted
        """
        self.config = config or Config()
        self.analyzer = GoAnalyzer()
        self.scanner = DeclarationScanner()
        self.stats = RunStats()
        self._stats_lock = threading.Lock()

    def run(self, paths: Optional[List[str]] = None) -> List[Finding]:
        """Scan files and return the merged findings.

        Args:
            paths: Files or directories; config.source_directories if None

        Returns:
            Findings of all files, each file's findings in declaration
            order. Order across files is not defined.
        """
        self.stats = RunStats()
        files = self.config.get_source_files(paths)
        logger.info(f"Scanning {len(files)} Go files")

        collector = FindingCollector()
        progress = ProgressLogger(len(files), logger)

        def task(file_path: str) -> None:
            collector.submit(self._scan_one(file_path))
            progress.update(file_path)

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            # result() re-raises fatal scanner faults in this thread
            for future in [executor.submit(task, f) for f in files]:
                future.result()

        self.analyzer.clear_cache()
        findings = collector.findings()
        self.stats.findings = len(findings)
        progress.complete("Scan complete")
        self._log_statistics()
        return findings

    def _scan_one(self, file_path: str) -> List[Finding]:
        try:
            parsed = self.analyzer.parse_file(file_path)
        except GoParseError as e:
            logger.error(str(e))
            with self._stats_lock:
                self.stats.errors += 1
                self.stats.failed_files.append(file_path)
            return []

        findings = self.scanner.scan_file(parsed)
        with self._stats_lock:
            self.stats.files_scanned += 1
        return findings

    def _log_statistics(self) -> None:
        logger.info(f"  Files scanned: {self.stats.files_scanned}")
        logger.info(f"  Global variables: {self.stats.findings}")
        logger.info(f"  Errors: {self.stats.errors}")
