"""
Custom exception hierarchy for the ROM organizer.

Parsing, ranking and duplicate resolution never raise. These types cover
the filesystem side of a run and bad operator input.
"""


class RomOrganizerError(Exception):
    """Base exception for all ROM organizer errors."""
    pass


class FileOperationError(RomOrganizerError):
    """Raised when a directory cannot be created or a file cannot be copied."""
    pass


class ConfigurationError(RomOrganizerError):
    """Raised when a run option has an invalid value."""
    pass
