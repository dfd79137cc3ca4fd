"""
Box score board user interface.

The pygame board lives in ``boxscore_keeper.ui.board`` and is imported on
demand so the layout can be used without a display.
"""

from .layout import BoardLayout, Box

__all__ = ['BoardLayout', 'Box']
