class LabyrinthError(Exception):
    """Base class for level generation errors."""


class ConfigurationError(LabyrinthError, ValueError):
    """Raised at the boundary for configurations that cannot yield a playable level."""


__all__ = ["LabyrinthError", "ConfigurationError"]
