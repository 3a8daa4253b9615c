"""Data model for board file classification."""

from dataclasses import dataclass, field
from enum import Enum


class BoardLayer(str, Enum):
    """Physical layer of the board a file's data belongs to."""

    COPPER = "copper"
    SOLDER_MASK = "soldermask"
    SILK = "silk"
    PASTE = "paste"
    DRILL = "drill"
    MILL = "mill"
    OUTLINE = "outline"
    CARBON = "carbon"
    NOTES = "notes"
    ASSEMBLY = "assembly"
    MECHANICAL = "mechanical"
    UNKNOWN = "unknown"


class BoardSide(str, Enum):
    """Side of the board a layer applies to."""

    TOP = "top"
    BOTTOM = "bottom"
    BOTH = "both"
    INTERNAL = "internal"
    UNKNOWN = "unknown"


class BoardFileType(str, Enum):
    """Format family of a file, detected from its content."""

    GERBER = "gerber"
    DRILL = "drill"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class LayerAssignment:
    """Side and layer a fabrication file was assigned to."""

    side: BoardSide = BoardSide.UNKNOWN
    layer: BoardLayer = BoardLayer.UNKNOWN

    @property
    def is_known(self) -> bool:
        """True when both side and layer were resolved."""
        return self.side is not BoardSide.UNKNOWN and self.layer is not BoardLayer.UNKNOWN

    def __str__(self) -> str:
        return f"{self.side.value}/{self.layer.value}"


UNKNOWN_ASSIGNMENT = LayerAssignment()


@dataclass(frozen=True)
class FileNameDescriptor:
    """Lower-case file name fragment and the assignment it implies."""

    file_string: str
    board_type: LayerAssignment


@dataclass
class ClassificationResult:
    """Result of classifying one fabrication file."""

    # File identification
    file_name: str
    extension: str

    # Classification outputs
    assignment: LayerAssignment = field(default_factory=LayerAssignment)
    file_type: BoardFileType | None = None
    banned: bool = False

    @property
    def side(self) -> BoardSide:
        return self.assignment.side

    @property
    def layer(self) -> BoardLayer:
        return self.assignment.layer

    @property
    def is_recognized(self) -> bool:
        """True when the file is usable for fabrication."""
        if self.banned or not self.assignment.is_known:
            return False
        return self.file_type is not BoardFileType.UNSUPPORTED

    @property
    def status(self) -> str:
        """Get the outcome as a short string."""
        if self.banned:
            return "banned"
        if not self.assignment.is_known:
            return "unknown"
        if self.file_type is BoardFileType.UNSUPPORTED:
            return "unsupported"
        return "classified"

    def to_dict(self) -> dict:
        return {
            "file_name": self.file_name,
            "extension": self.extension,
            "side": self.side.value,
            "layer": self.layer.value,
            "file_type": self.file_type.value if self.file_type else None,
            "banned": self.banned,
            "status": self.status,
        }
