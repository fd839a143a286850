class ListerError(OSError):
    """Base class for listing errors.

    Attributes
    ----------
    path : str
        Path the failed operation was applied to.
    cause : OSError
        Underlying system error.
    """

    action = 'access'

    def __init__(self, path: str, cause: OSError):
        super().__init__(cause.errno, cause.strerror, path)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        reason = self.cause.strerror or str(self.cause)
        return f"Failed to {self.action} '{self.path}': {reason}"


class OpenError(ListerError):
    """Directory cannot be opened."""

    action = 'open directory'


class StatError(ListerError):
    """File metadata cannot be queried."""

    action = 'stat file'
