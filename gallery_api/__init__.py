"""
Top-level package for the Gallery API.

All functionality lives in submodules under ``app``.  The bundled
sample document lives in ``data/``.
"""

__all__ = []
