from .core import GameSession, SessionState
from .errors import RootWordSourceExhausted, SessionError, SessionNotStarted

__all__ = ["GameSession", "SessionState", "SessionError", "RootWordSourceExhausted", "SessionNotStarted"]
