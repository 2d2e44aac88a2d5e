"""Streamfan data models — all Pydantic v2, all frozen (immutable)."""

from streamfan.models.outputs import CopyReport, OutputFiles

__all__ = ["CopyReport", "OutputFiles"]
