"""
Redrum Shared Module
====================

Common utilities, models, and configuration management used by the
Redrum analysis pipeline and its command-line front end.
"""

from shared.config import Config

__all__ = ["Config"]
