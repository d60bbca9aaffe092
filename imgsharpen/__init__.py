"""Batch 3x3 image sharpening with sequential, thread-pool and round-robin worker runners."""

__version__ = "0.1.0"