"""Find and render the ancestry path connecting two people in a relationship dataset."""

__version__ = "0.1.0"
