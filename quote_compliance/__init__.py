"""Quote Compliance: legal risk detection and locale compliance for quotes."""

__version__ = "1.0.0"
