"""Service layer for board logic."""

from .board_service import BoardService
from .form_service import FormService
from .mode_service import KeyToken, ModeService

__all__ = [
    "BoardService",
    "FormService",
    "KeyToken",
    "ModeService",
]
