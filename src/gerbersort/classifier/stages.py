"""Ordered resolver stages used to assign a side and layer to a file name.

Each stage receives the parsed file name and returns a LayerAssignment when it
can decide, or None to hand over to the next stage.
"""

from collections.abc import Callable
from dataclasses import dataclass

from .models import BoardLayer, BoardSide, LayerAssignment
from .tables import (
    BASE_NAME_TABLE,
    EXTENSION_TABLE,
    FILE_NAME_DESCRIPTORS,
    GENERIC_EXTENSIONS,
    NAME_MARKERS,
)

# Mixed-case on purpose: matched against the lower-cased name, these never
# hit unless case-insensitive assembly matching is enabled.
ASSEMBLY_KEYWORDS = ("Asm", "Assm", "Assy", "Assem")


@dataclass(frozen=True)
class FileNameParts:
    """A file name split into the pieces the stages look at."""

    lower_name: str
    extension: str
    base_name: str

    @classmethod
    def parse(cls, file_name: str) -> "FileNameParts":
        pieces = file_name.split(".")
        extension = pieces[-1].lower() if len(pieces) > 1 else ""
        return cls(
            lower_name=file_name.lower(),
            extension=extension,
            base_name=pieces[0].lower(),
        )

    @property
    def is_generic(self) -> bool:
        return self.extension in GENERIC_EXTENSIONS


Stage = Callable[[FileNameParts], LayerAssignment | None]


def resolve_extension(parts: FileNameParts) -> LayerAssignment | None:
    """Look the extension up in the vendor extension table."""
    return EXTENSION_TABLE.get(parts.extension)


def resolve_base_name(parts: FileNameParts) -> LayerAssignment | None:
    """Match well-known base names of generic Gerber files (top.gbr, outline.ger)."""
    if not parts.is_generic:
        return None
    return BASE_NAME_TABLE.get(parts.base_name)


def resolve_name_marker(parts: FileNameParts) -> LayerAssignment | None:
    """Find a CAD tool layer marker (-F_Cu, _tslk, ...) in a generic file name."""
    if not parts.is_generic:
        return None
    for marker, assignment in NAME_MARKERS:
        if marker in parts.lower_name:
            return assignment
    return None


def _keyword_side(name: str) -> BoardSide:
    if "top" in name:
        return BoardSide.TOP
    if "bot" in name:
        return BoardSide.BOTTOM
    if "board" in name:
        return BoardSide.BOTH
    return BoardSide.UNKNOWN


class KeywordStage:
    """
    Score loose keywords in a generic file name.

    Side and layer are inferred independently; the result only counts when
    both are known. A top/bottom hit presets the layer to copper, and a bare
    "layer" keyword forces an inner copper plane.
    """

    def __init__(self, assembly_case_sensitive: bool = True):
        self.assembly_case_sensitive = assembly_case_sensitive

    def _is_assembly(self, name: str) -> bool:
        if self.assembly_case_sensitive:
            return any(keyword in name for keyword in ASSEMBLY_KEYWORDS)
        return any(keyword.lower() in name for keyword in ASSEMBLY_KEYWORDS)

    def __call__(self, parts: FileNameParts) -> LayerAssignment | None:
        if not parts.is_generic:
            return None

        name = parts.lower_name
        side = _keyword_side(name)
        layer = BoardLayer.UNKNOWN
        if side in (BoardSide.TOP, BoardSide.BOTTOM):
            layer = BoardLayer.COPPER

        if "copper" in name:
            layer = BoardLayer.COPPER
        elif "paste" in name or "cream" in name:
            layer = BoardLayer.PASTE
        elif "mask" in name:
            layer = BoardLayer.SOLDER_MASK
        elif "silk" in name:
            layer = BoardLayer.SILK
        elif self._is_assembly(name):
            layer = BoardLayer.ASSEMBLY
        elif "outline" in name or "dimension" in name:
            layer = BoardLayer.OUTLINE
        elif "layer" in name:
            layer = BoardLayer.COPPER
            side = BoardSide.INTERNAL

        if side is BoardSide.UNKNOWN or layer is BoardLayer.UNKNOWN:
            return None
        return LayerAssignment(side, layer)

    def __repr__(self) -> str:
        return f"KeywordStage(assembly_case_sensitive={self.assembly_case_sensitive})"


def resolve_descriptor(parts: FileNameParts) -> LayerAssignment | None:
    """Scan the descriptor fragments (.toplayer, .bcream, ...) in table order."""
    for descriptor in FILE_NAME_DESCRIPTORS:
        if descriptor.file_string in parts.lower_name:
            return descriptor.board_type
    return None


def build_stages(assembly_case_sensitive: bool = True) -> tuple[Stage, ...]:
    """Build the resolver pipeline in precedence order."""
    return (
        resolve_extension,
        resolve_base_name,
        resolve_name_marker,
        KeywordStage(assembly_case_sensitive),
        resolve_descriptor,
    )


DEFAULT_STAGES = build_stages()


def run_stages(parts: FileNameParts, stages: tuple[Stage, ...] = DEFAULT_STAGES) -> LayerAssignment:
    """Return the first assignment produced by the stages, or an unknown one."""
    for stage in stages:
        assignment = stage(parts)
        if assignment is not None:
            return assignment
    return LayerAssignment()
