"""Configuration models using Pydantic for validation."""

import codecs
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClassifierSettings(BaseModel):
    """Settings for side and layer classification."""

    extra_banned_extensions: list[str] = Field(
        default_factory=list,
        description="Extensions to reject in addition to the built-in denylist",
    )
    assembly_keywords_case_sensitive: bool = Field(
        default=True,
        description="Match assembly keywords (Asm, Assy, ...) case-sensitively against "
        "the lower-cased file name (they then never match)",
    )

    @field_validator("extra_banned_extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Store extensions lower-case and without a leading dot."""
        normalized = [ext.strip().lstrip(".").lower() for ext in v]
        return [ext for ext in normalized if ext]


class ScanSettings(BaseModel):
    """Settings for scanning folders and archives of fabrication files."""

    ignored_names: list[str] = Field(
        default_factory=lambda: [".DS_Store", "Thumbs.db"],
        description="File names to skip entirely",
    )
    ignored_path_fragments: list[str] = Field(
        default_factory=lambda: ["__MACOSX"],
        description="Skip any file whose path contains one of these fragments",
    )
    max_file_size_mb: int = Field(
        default=50, ge=1, description="Maximum file size to read for format detection (in MB)"
    )
    encoding: str = Field(default="utf-8", description="Text encoding used to decode file content")
    recursive: bool = Field(default=True, description="Descend into subfolders")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the encoding is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class GerberSortConfig(BaseModel):
    """Main configuration for gerbersort."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    classifier: ClassifierSettings = Field(
        default_factory=ClassifierSettings, description="Classification settings"
    )
    scan: ScanSettings = Field(default_factory=ScanSettings, description="Scanner settings")
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )
