"""BlockLens: race pacing projections."""

__version__ = "0.1.0"
