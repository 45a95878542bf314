"""EWMH and ICCCM window manager hints over an in-memory X connection model."""

__version__ = "0.1.0"

__all__ = ["connection", "icccm", "ewmh_root", "ewmh_client"]