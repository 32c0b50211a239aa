"""playbill — theatrical invoice statement printer."""

__version__ = "0.1.0"
