"""
M68K Timing Command-Line Interface
==================================

- **m68ktimes**: generate the Markdown timing reference and list the
  instruction registry

Implemented as a Click group with shared error reporting.
"""

__all__ = ["m68ktimes"]
