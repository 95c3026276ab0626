"""Model file parsing, alignment splitting, sequence I/O and helpers for phylogenetic placement."""

__version__ = "0.1.0"