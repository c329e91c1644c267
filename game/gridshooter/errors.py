"""
Exceptions raised by the grid shooter
"""


class GridShooterError(Exception):
    """Base class for recoverable game errors"""


class BoundaryExceededError(GridShooterError):
    """A ship move would leave the grid"""


class InvalidCommandError(GridShooterError):
    """An input token is not a known command"""
