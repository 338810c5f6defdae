class SessionError(Exception):
    """Base class for faults that stop a game session from running."""


class RootWordSourceExhausted(SessionError):
    """The root word source returned no entries, so no game can start."""


class SessionNotStarted(SessionError):
    """A word was submitted before the first restart()."""
