class MultitarError(Exception):
    """Base class for multitar-specific errors."""


# Filesystem
class FileAccessError(MultitarError):
    """An input file could not be stat'ed, opened or read."""


class FileWriteError(MultitarError):
    """A stage buffer or the output archive could not be written."""


# Encoding
class OctalOverflowError(MultitarError, ValueError):
    pass


class NameTooLongError(MultitarError, ValueError):
    pass


# Staging
class StageError(MultitarError, KeyError):
    pass
