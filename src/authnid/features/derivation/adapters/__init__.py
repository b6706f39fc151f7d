"""Observer adapters for the derivation feature."""

from .logging_observer import LoggingDerivationObserver

__all__ = ["LoggingDerivationObserver"]
