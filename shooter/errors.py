"""
Exception hierarchy for the shooter core
"""


class ShooterError(Exception):
    """Base class for every error raised by the shooter package"""


class ConfigError(ShooterError, ValueError):
    """Invalid setup value (sizes, rates) detected while building the game"""


class AnimationConfigError(ConfigError):
    """Animation playback rate that cannot produce a frame delay"""


class AssetLoadError(ShooterError):
    """Image or sprite sheet that could not be loaded or sliced"""

    def __init__(self, path: str, reason: str = "could not be loaded"):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
