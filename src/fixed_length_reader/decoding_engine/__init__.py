"""Decoding engine exports."""

from .engine import DEFAULT_ENCODING, FixedLengthEngine, create_engine

__all__ = ["DEFAULT_ENCODING", "FixedLengthEngine", "create_engine"]
