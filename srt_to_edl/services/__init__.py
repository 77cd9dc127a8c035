"""Service layer modules (file and network I/O).

Reading SRT sources and writing EDL output are isolated here so the core
stays pure and the CLI flows stay mockable.
"""

__all__ = [
    "source",
    "output",
    "errors",
]
