from syncbridge.core.runtime.adapters import bridged, launcher_from_future, launcher_from_pair_callback
from syncbridge.core.runtime.bridge import CompletionSlot, SyncBridge, await_result
from syncbridge.core.runtime.errors import BridgeError, OperationFailure, TimeoutFailure
from syncbridge.core.runtime.outcome import Failure, Outcome, Success, outcome_of
from syncbridge.core.runtime.timeouts import DEFAULT_TIMEOUT_SECONDS, Deadline

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "BridgeError",
    "CompletionSlot",
    "Deadline",
    "Failure",
    "OperationFailure",
    "Outcome",
    "Success",
    "SyncBridge",
    "TimeoutFailure",
    "__version__",
    "await_result",
    "bridged",
    "launcher_from_future",
    "launcher_from_pair_callback",
    "outcome_of",
]
