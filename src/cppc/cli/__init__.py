"""
cppc Command-Line Interface
===========================

This package provides the `cppc` command, a Click application that
compiles one source file to Rust or FASM assembly.
"""

__all__ = ["cppc"]
