class FhashError(Exception):
    """
    Base class for fhash failures that are not plain filesystem errors.

    Filesystem failures (stat, open, read, listing) are raised as the
    native OSError and are never wrapped.
    """


class ArgumentError(FhashError, ValueError):
    """A requested path is missing or is not a directory."""

    def __init__(self, path, message: str = "is not a directory"):
        self.path = path
        super().__init__(f"{message}: {path}")


class ConfigError(FhashError, ValueError):
    pass


class ManifestFormatError(FhashError, ValueError):
    pass
