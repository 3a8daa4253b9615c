"""Classifier module for assigning fabrication files to board layers."""

from .classifier import (
    LayerClassifier,
    board_file_type,
    classify_file,
    determine_side_and_layer,
    get_classifier,
    get_file_ext,
    get_file_name,
    is_banned_extension,
)
from .models import (
    BoardFileType,
    BoardLayer,
    BoardSide,
    ClassificationResult,
    FileNameDescriptor,
    LayerAssignment,
)
from .tables import BANNED_EXTENSIONS

__all__ = [
    "LayerClassifier",
    "ClassificationResult",
    "LayerAssignment",
    "FileNameDescriptor",
    "BoardFileType",
    "BoardLayer",
    "BoardSide",
    "BANNED_EXTENSIONS",
    "board_file_type",
    "classify_file",
    "determine_side_and_layer",
    "get_classifier",
    "get_file_ext",
    "get_file_name",
    "is_banned_extension",
]
