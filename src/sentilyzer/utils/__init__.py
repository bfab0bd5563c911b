"""Utility modules for Sentilyzer."""

from .data_prep import export_filename, results_to_csv, results_to_json, write_export
from .text_source import decode_upload, normalize_file_content, normalize_text_input

__all__ = [
    "decode_upload",
    "export_filename",
    "normalize_file_content",
    "normalize_text_input",
    "results_to_csv",
    "results_to_json",
    "write_export",
]
