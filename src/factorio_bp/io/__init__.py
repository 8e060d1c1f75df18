"""
IO utilities for text file operations.
"""
from .text_load import read_text
from .text_write import write_text_atomic

__all__ = ["read_text", "write_text_atomic"]
