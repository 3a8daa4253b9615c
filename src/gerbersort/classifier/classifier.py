"""Classifier for PCB fabrication files (Gerber, Excellon drill) by name and content."""

from collections.abc import Iterable

from ..config.models import ClassifierSettings
from ..utils.logging import get_logger
from .models import BoardFileType, ClassificationResult, LayerAssignment
from .stages import FileNameParts, Stage, build_stages, run_stages
from .tables import BANNED_EXTENSIONS

logger = get_logger(__name__)

# Gerber format specification parameter, e.g. %FSLAX26Y26*%
GERBER_MARKER = "%FS"
# Excellon header start
DRILL_MARKER = "M48"


def get_file_ext(file_name: str) -> str:
    """Return the text after the last dot, case preserved, or "" if there is none."""
    dot_idx = file_name.rfind(".")
    if dot_idx < 0:
        return ""
    return file_name[dot_idx + 1 :]


def get_file_name(file_name: str) -> str:
    """Return the last "/"-separated component of a path."""
    slash_idx = file_name.rfind("/")
    if slash_idx < 0:
        return file_name
    return file_name[slash_idx + 1 :]


def board_file_type(content: str) -> BoardFileType:
    """
    Detect the format family of a file from its content.

    Gerber wins over drill when both markers are present.
    """
    if GERBER_MARKER in content:
        return BoardFileType.GERBER
    if DRILL_MARKER in content:
        return BoardFileType.DRILL
    return BoardFileType.UNSUPPORTED


class LayerClassifier:
    """
    Assigns board side and layer to fabrication files.

    Resolution runs through an ordered pipeline of stages (exact extension,
    generic base name, CAD tool name markers, keyword scoring, descriptor
    fragments); the first stage that decides wins.
    """

    def __init__(self, settings: ClassifierSettings | None = None):
        """
        Initialize the classifier.

        Args:
            settings: Classifier configuration settings
        """
        self.settings = settings or ClassifierSettings()
        self.stages: tuple[Stage, ...] = build_stages(
            assembly_case_sensitive=self.settings.assembly_keywords_case_sensitive
        )
        self.banned_extensions = BANNED_EXTENSIONS | frozenset(
            self.settings.extra_banned_extensions
        )

    def determine_side_and_layer(self, file_name: str) -> LayerAssignment:
        """Assign a side and layer from the file name alone."""
        return run_stages(FileNameParts.parse(file_name), self.stages)

    def board_file_type(self, content: str) -> BoardFileType:
        return board_file_type(content)

    def is_banned_extension(self, extension: str) -> bool:
        """Check an extension (with or without leading dot) against the denylist."""
        return extension.lstrip(".").lower() in self.banned_extensions

    def classify(self, file_name: str, content: str | None = None) -> ClassificationResult:
        """
        Classify a single file.

        Args:
            file_name: File name, optionally with a "/" separated path
            content: File content for format detection; skipped when None

        Returns:
            ClassificationResult for the file
        """
        extension = get_file_ext(get_file_name(file_name))
        if self.is_banned_extension(extension):
            logger.debug(f"Skipping {file_name}: extension '{extension}' is denylisted")
            return ClassificationResult(file_name=file_name, extension=extension, banned=True)

        assignment = self.determine_side_and_layer(file_name)
        file_type = board_file_type(content) if content is not None else None

        result = ClassificationResult(
            file_name=file_name,
            extension=extension,
            assignment=assignment,
            file_type=file_type,
        )

        if result.status == "classified":
            logger.debug(f"Classified {file_name}: {assignment}")
        else:
            logger.debug(f"Could not classify {file_name}: {result.status}")

        return result

    def classify_multiple(
        self, files: Iterable[tuple[str, str | None]]
    ) -> list[ClassificationResult]:
        """
        Classify several (file_name, content) pairs.

        Args:
            files: Iterable of (file_name, content) tuples

        Returns:
            List of ClassificationResult objects
        """
        results: list[ClassificationResult] = []
        for file_name, content in files:
            results.append(self.classify(file_name, content))
        return results


_default_classifier: LayerClassifier | None = None


def get_classifier() -> LayerClassifier:
    """Get the shared classifier built from default settings."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = LayerClassifier()
    return _default_classifier


def determine_side_and_layer(file_name: str) -> LayerAssignment:
    """Assign a side and layer to a file name using the default settings."""
    return get_classifier().determine_side_and_layer(file_name)


def is_banned_extension(extension: str) -> bool:
    """Check an extension against the built-in denylist."""
    return extension.lstrip(".").lower() in BANNED_EXTENSIONS


def classify_file(file_name: str, content: str | None = None) -> ClassificationResult:
    """Classify a file by name and, when given, content."""
    return get_classifier().classify(file_name, content)
