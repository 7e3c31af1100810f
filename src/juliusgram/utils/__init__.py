"""
juliusgram utilities package
"""

from .io_utils import read_source_file, write_output_file, iter_pattern_lines

__all__ = ["read_source_file", "write_output_file", "iter_pattern_lines"]
