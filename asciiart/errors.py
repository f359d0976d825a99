from __future__ import annotations


class AsciiArtError(Exception):
    """Base class for every error raised by asciiart."""


# ===== Character brightness index =====


class EmptyInitError(AsciiArtError, ValueError):
    def __init__(self, message: str = "Cannot build an index from an empty charset"):
        super().__init__(message)


class EmptyIndexError(AsciiArtError, LookupError):
    def __init__(self, message: str = "Tree is empty"):
        super().__init__(message)


class OutOfBoundsError(AsciiArtError, ValueError):
    def __init__(self, message: str = "Search is out of boundaries"):
        super().__init__(message)


class IndexConsistencyError(AsciiArtError, LookupError):
    """An active character has no bucket at its recomputed key."""


# ===== Image partitioning / reduction =====


class InvalidPartitionError(AsciiArtError, ValueError):
    pass


class InvalidBlockError(AsciiArtError, ValueError):
    pass


# ===== Shell =====


class InsufficientCharsetError(AsciiArtError):
    def __init__(self, message: str = "Did not execute. Charset is too small."):
        super().__init__(message)


class CommandError(AsciiArtError, ValueError):
    pass


class InvalidCommandError(CommandError):
    def __init__(self, message: str = "Invalid command. Please try again."):
        super().__init__(message)


class CommandFormatError(CommandError):
    pass


class ResolutionBoundsError(CommandError):
    def __init__(self, message: str = "Did not change resolution due to exceeding boundaries."):
        super().__init__(message)
