"""minver data models — all Pydantic v2, all frozen (immutable)."""

from minver.models.events import Event
from minver.models.messages import (
    FINAL_RESULT_KINDS,
    MESSAGE_TYPE_MAP,
    CheckToolchain,
    DependencyGraph,
    ListResult,
    ListVariant,
    Message,
    MessageBase,
    MessageKind,
    Meta,
    Progress,
    ResolvedVersion,
    SetOutput,
    ShowOutput,
    VerifyResult,
)
from minver.models.versions import BareVersion, ToolchainSpec

__all__ = [
    # versions
    "BareVersion",
    "ToolchainSpec",
    # messages
    "MessageKind",
    "MessageBase",
    "Message",
    "FINAL_RESULT_KINDS",
    "MESSAGE_TYPE_MAP",
    "ResolvedVersion",
    "ListVariant",
    "DependencyGraph",
    "ListResult",
    "SetOutput",
    "ShowOutput",
    "VerifyResult",
    "Progress",
    "Meta",
    "CheckToolchain",
    # events
    "Event",
]
