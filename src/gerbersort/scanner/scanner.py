"""Scanner that classifies every file in a folder or ZIP archive of fabrication data."""

import zipfile
import zlib
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..classifier import ClassificationResult, LayerClassifier
from ..config.models import ScanSettings
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ScanStatus(str, Enum):
    """Outcome for a single scanned file."""

    CLASSIFIED = "classified"
    UNSUPPORTED = "unsupported"
    SKIPPED = "skipped"
    BANNED = "banned"
    IO_ERROR = "io_error"
    UNZIP_ERROR = "unzip_error"


@dataclass
class ScanEntry:
    """One file found while scanning."""

    source: Path
    file_name: str
    status: ScanStatus
    result: ClassificationResult | None = None
    error_message: str | None = None

    def to_dict(self) -> dict:
        data = {
            "source": str(self.source),
            "file_name": self.file_name,
            "status": self.status.value,
        }
        if self.result is not None:
            data["side"] = self.result.side.value
            data["layer"] = self.result.layer.value
            data["file_type"] = self.result.file_type.value if self.result.file_type else None
        if self.error_message:
            data["error"] = self.error_message
        return data


@dataclass
class ScanReport:
    """All entries found under one scan root."""

    source: Path
    entries: list[ScanEntry] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        """Count entries per status."""
        counts = {status.value: 0 for status in ScanStatus}
        for entry in self.entries:
            counts[entry.status.value] += 1
        return counts

    @property
    def classified(self) -> list[ScanEntry]:
        return [e for e in self.entries if e.status is ScanStatus.CLASSIFIED]

    def summary(self) -> dict:
        """
        Summarize the scan.

        The recognized ratio is taken over the files that were actually
        attempted, i.e. excluding skipped, banned and unreadable ones.
        """
        counts = self.counts()
        attempted = counts["classified"] + counts["unsupported"]
        return {
            "total": len(self.entries),
            **counts,
            "recognized_ratio": counts["classified"] / attempted if attempted else 0.0,
        }

    def to_dict(self) -> dict:
        return {
            "source": str(self.source),
            "summary": self.summary(),
            "entries": [entry.to_dict() for entry in self.entries],
        }


class BoardFileScanner:
    """
    Walks folders and ZIP archives and classifies each fabrication file.

    Files are first checked against the extension denylist, then classified
    by name. Only files with a known side and layer are read to confirm
    their format from content.
    """

    def __init__(
        self,
        settings: ScanSettings | None = None,
        classifier: LayerClassifier | None = None,
    ):
        """
        Initialize the scanner.

        Args:
            settings: Scan configuration settings
            classifier: Classifier to use; a default one is built if None
        """
        self.settings = settings or ScanSettings()
        self.classifier = classifier or LayerClassifier()
        self.max_size_bytes = self.settings.max_file_size_mb * 1024 * 1024

    def scan(self, path: Path) -> ScanReport:
        """
        Scan a folder, a ZIP archive or a single file.

        Args:
            path: Folder, .zip archive or fabrication file

        Returns:
            ScanReport with one entry per file

        Raises:
            FileNotFoundError: If path does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Scan path does not exist: {path}")

        if path.is_dir():
            report = self.scan_directory(path)
        elif path.suffix.lower() == ".zip" or zipfile.is_zipfile(path):
            report = self.scan_archive(path)
        else:
            report = self.scan_file(path)

        counts = report.counts()
        logger.info(
            f"Scanned {path.name}: {len(report.entries)} files, "
            f"{counts['classified']} classified, {counts['skipped']} skipped"
        )
        return report

    def scan_directory(self, root: Path) -> ScanReport:
        """Classify every file below a folder."""
        report = ScanReport(source=root)
        paths = root.rglob("*") if self.settings.recursive else root.iterdir()

        for path in sorted(paths):
            if not path.is_file():
                continue
            name = path.relative_to(root).as_posix()
            if self._should_ignore(name):
                continue
            report.entries.append(self._classify_path(root, path, name))

        return report

    def scan_file(self, path: Path) -> ScanReport:
        """Classify a single file that is not an archive."""
        report = ScanReport(source=path.parent)
        report.entries.append(self._classify_path(path.parent, path, path.name))
        return report

    def scan_archive(self, archive: Path) -> ScanReport:
        """Classify every member of a ZIP archive."""
        report = ScanReport(source=archive)

        try:
            zip_ref = zipfile.ZipFile(archive, "r")
        except (zipfile.BadZipFile, OSError) as e:
            logger.warning(f"Could not open archive {archive}: {e}")
            report.entries.append(
                ScanEntry(archive, archive.name, ScanStatus.UNZIP_ERROR, error_message=str(e))
            )
            return report

        with zip_ref:
            for info in zip_ref.infolist():
                if info.is_dir() or self._should_ignore(info.filename):
                    continue
                if not self.settings.recursive and "/" in info.filename.rstrip("/"):
                    continue

                def read_member(info=info) -> bytes:
                    return zip_ref.read(info)

                report.entries.append(
                    self._classify_entry(archive, info.filename, info.file_size, read_member)
                )

        return report

    def _should_ignore(self, name: str) -> bool:
        """Check if a file should be ignored based on its name or path."""
        base_name = name.rsplit("/", 1)[-1]
        if base_name in self.settings.ignored_names:
            return True
        return any(fragment in name for fragment in self.settings.ignored_path_fragments)

    def _classify_path(self, root: Path, path: Path, name: str) -> ScanEntry:
        try:
            size = path.stat().st_size
        except OSError as e:
            return ScanEntry(root, name, ScanStatus.IO_ERROR, error_message=str(e))
        return self._classify_entry(root, name, size, path.read_bytes)

    def _classify_entry(
        self,
        source: Path,
        name: str,
        size: int,
        read_bytes: Callable[[], bytes],
    ) -> ScanEntry:
        """Classify one file, reading its content only when the name is recognized."""
        result = self.classifier.classify(name)

        if result.banned:
            return ScanEntry(source, name, ScanStatus.BANNED, result=result)
        if not result.assignment.is_known:
            return ScanEntry(source, name, ScanStatus.SKIPPED, result=result)

        if size > self.max_size_bytes:
            return ScanEntry(
                source,
                name,
                ScanStatus.IO_ERROR,
                result=result,
                error_message=f"File exceeds {self.settings.max_file_size_mb}MB limit",
            )

        try:
            data = read_bytes()
        except (zipfile.BadZipFile, zlib.error, EOFError, RuntimeError, NotImplementedError) as e:
            logger.warning(f"Could not extract {name}: {e}")
            return ScanEntry(
                source, name, ScanStatus.UNZIP_ERROR, result=result, error_message=str(e)
            )
        except OSError as e:
            logger.warning(f"Could not read {name}: {e}")
            return ScanEntry(source, name, ScanStatus.IO_ERROR, result=result, error_message=str(e))

        content = data.decode(self.settings.encoding, errors="replace")
        result = self.classifier.classify(name, content)

        status = ScanStatus.CLASSIFIED if result.is_recognized else ScanStatus.UNSUPPORTED
        return ScanEntry(source, name, status, result=result)
