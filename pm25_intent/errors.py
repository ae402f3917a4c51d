class PM25Error(Exception):
    """Base class for failures that end a PM2.5 action invocation.

    ``reason`` is a short code the locale tables translate into a
    user-facing message; the exception text itself is only ever logged.
    """

    kind = "error"

    def __init__(self, reason: str, message: str = ""):
        super().__init__(message or reason)
        self.reason = reason


class LocationFailure(PM25Error):
    kind = "location"


class NetworkError(PM25Error):
    kind = "network"


class DataError(PM25Error):
    kind = "data"
