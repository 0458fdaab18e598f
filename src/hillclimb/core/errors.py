"""Common hillclimb exceptions."""


class HillClimbError(Exception):
    """Base class for errors raised by hillclimb."""


class HillClimbValueError(HillClimbError, ValueError):
    """Raised when hillclimb detects invalid user-provided arguments or configuration."""


class EmptyNeighborhoodError(HillClimbError):
    """Raised when a random neighbor is requested from a state with no neighbors."""


__all__ = ["HillClimbError", "HillClimbValueError", "EmptyNeighborhoodError"]
