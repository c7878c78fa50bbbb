"""Converter services: manual form, AI form, and the session owning history."""

from omniconvert.services.ai_converter import AIConverter, is_available
from omniconvert.services.manual_converter import ManualConverter
from omniconvert.services.session import ConverterSession

__all__ = [
    "AIConverter",
    "ConverterSession",
    "ManualConverter",
    "is_available",
]
