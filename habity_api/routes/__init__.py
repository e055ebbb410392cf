"""
API route modules.
"""

from . import imports, monitoring

__all__ = ["imports", "monitoring"]
