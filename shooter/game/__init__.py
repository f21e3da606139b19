"""Game module - menu and asteroid field views"""

from .game_view import GameView
from .main_menu import MainMenuView

__all__ = ['GameView', 'MainMenuView']
