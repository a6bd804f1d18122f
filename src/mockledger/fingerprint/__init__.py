from .engine import FingerprintEngine

__all__ = ["FingerprintEngine"]
