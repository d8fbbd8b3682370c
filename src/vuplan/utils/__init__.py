from __future__ import annotations

from vuplan.utils.logger import configure_logger, get_logger

__all__ = ["configure_logger", "get_logger"]
