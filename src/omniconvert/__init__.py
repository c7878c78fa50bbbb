"""OmniConvert: table-driven and AI-assisted unit conversion."""

__version__ = "0.1.0"
