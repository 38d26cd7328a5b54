"""
Common utilities package for the Twitter API backend.

``app.utils.logger`` is imported by the configuration module itself, so this
package only re-exports the logger; authentication helpers live in
``app.utils.auth``.
"""

from app.utils.logger import cleanup_old_logs, setup_logger

__all__ = [
    "cleanup_old_logs",
    "setup_logger",
]
