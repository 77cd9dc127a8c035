"""
SRT to EDL marker converter
"""

__version__ = "0.1.0"
