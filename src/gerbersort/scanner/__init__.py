"""Scanner module for classifying folders and archives of fabrication files."""

from .scanner import BoardFileScanner, ScanEntry, ScanReport, ScanStatus

__all__ = ["BoardFileScanner", "ScanEntry", "ScanReport", "ScanStatus"]
