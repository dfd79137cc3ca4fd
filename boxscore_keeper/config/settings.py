"""
Configuration settings for the box score keeper.
"""


class KeeperConfig:
    """Configuration constants for gesture recognition and stat keeping."""

    # Timing configurations (in milliseconds)
    DOUBLE_TAP_TIMEOUT = 400
    CONFIRMATION_DELAY_MS = 1000

    # Distance configurations (as percentages of screen diagonal)
    TAP_DISTANCE_PERCENT = 1.0
    DOUBLE_TAP_MAX_DISTANCE_PERCENT = 8.0
    DRAG_THRESHOLD_PERCENT = 1.5

    # Absolute drag threshold (pixels) used when the screen size is known up front
    DRAG_THRESHOLD = 30

    # Roster
    PLAYERS_PER_TEAM = 5
    TEAM_NAMES = ('Team A', 'Team B')

    # Files
    STORE_FILE = 'boxscore_players.json'
    DEBUG_LOG_FILE = 'boxscore_debug.log'

    # Board window
    WINDOW_WIDTH = 1280
    WINDOW_HEIGHT = 800

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not name.isupper() or not hasattr(type(self), name):
                raise ValueError(f"Unknown configuration setting: {name}")
            setattr(self, name, value)

    @property
    def confirmation_delay(self) -> float:
        """Confirmation banner lifetime in seconds."""
        return self.CONFIRMATION_DELAY_MS / 1000.0
