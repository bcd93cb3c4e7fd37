"""Nucleotide and amino-acid sequence translation with biochemical property calculations."""

__version__ = "0.1.0"
