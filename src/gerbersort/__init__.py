"""
gerbersort - classify PCB fabrication files by board side and layer.

Looks at file names and content of Gerber and Excellon drill files, as
produced by CAD tools, and works out which physical layer of the board
(copper, soldermask, silk, paste, drill, outline, ...) and which side each
file belongs to.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .classifier import (
    BANNED_EXTENSIONS,
    BoardFileType,
    BoardLayer,
    BoardSide,
    ClassificationResult,
    LayerAssignment,
    LayerClassifier,
    board_file_type,
    classify_file,
    determine_side_and_layer,
    get_file_ext,
    get_file_name,
    is_banned_extension,
)
from .config import get_config
from .scanner import BoardFileScanner, ScanReport
from .utils.logging import get_logger

__all__ = [
    "get_config",
    "get_logger",
    # Classifier
    "LayerClassifier",
    "ClassificationResult",
    "LayerAssignment",
    "BoardFileType",
    "BoardLayer",
    "BoardSide",
    "BANNED_EXTENSIONS",
    "board_file_type",
    "classify_file",
    "determine_side_and_layer",
    "get_file_ext",
    "get_file_name",
    "is_banned_extension",
    # Scanner
    "BoardFileScanner",
    "ScanReport",
]
