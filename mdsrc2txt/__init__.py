"""
mdsrc2txt: combine source files from a directory or ZIP archive
into a single text file.
"""

__version__ = "1.0.0"
