from .core import RESTART_TOKEN, replay, summarize
from .io import write_csv, write_manifest

__all__ = ["RESTART_TOKEN", "replay", "summarize", "write_csv", "write_manifest"]
