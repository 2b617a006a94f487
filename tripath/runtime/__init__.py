"""Runtime exports."""

from .config import EngineConfig, build_engine_config, load_config
from .coordinator import PassResult, RunCoordinator
from .presentation import PresentationSink, RecordingSink

__all__ = [
    "EngineConfig",
    "build_engine_config",
    "load_config",
    "PassResult",
    "RunCoordinator",
    "PresentationSink",
    "RecordingSink",
]
