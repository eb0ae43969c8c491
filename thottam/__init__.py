"""Thottam: bilingual (Tamil/English) content site backend."""

__version__ = "0.1.0"
