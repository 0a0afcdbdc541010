"""textschema - compile textual patterns into recognizers"""

__version__ = "0.1.0"
