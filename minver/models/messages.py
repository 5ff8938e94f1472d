"""Message variants carried by reporter events.

The set of variants is closed: ``Message`` is a discriminated union over the
``kind`` tag, and ``FINAL_RESULT_KINDS`` names the variants that conclude a
command.  Everything else (progress ticks, tool metadata, toolchain probes)
is intermediate and may be ignored by reporters that only care about the
outcome.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from minver.models.versions import BareVersion, ToolchainSpec


class MessageKind(str, Enum):
    """Tag for every message variant."""

    RESOLVED_VERSION = "resolved_version"
    LIST_RESULT = "list_result"
    SET_OUTPUT = "set_output"
    SHOW_OUTPUT = "show_output"
    VERIFY_RESULT = "verify_result"
    PROGRESS = "progress"
    META = "meta"
    CHECK_TOOLCHAIN = "check_toolchain"


FINAL_RESULT_KINDS: frozenset[MessageKind] = frozenset(
    {
        MessageKind.RESOLVED_VERSION,
        MessageKind.LIST_RESULT,
        MessageKind.SET_OUTPUT,
        MessageKind.SHOW_OUTPUT,
        MessageKind.VERIFY_RESULT,
    }
)


class MessageBase(BaseModel):
    """Fields and behaviour shared by every message variant."""

    model_config = ConfigDict(frozen=True)

    kind: str

    @property
    def message_kind(self) -> MessageKind:
        return MessageKind(self.kind)

    def is_final_result(self) -> bool:
        """Whether this message carries the final outcome of a command."""
        return self.message_kind in FINAL_RESULT_KINDS


# ---------------------------------------------------------------------------
# Final results
# ---------------------------------------------------------------------------


class ResolvedVersion(MessageBase):
    """Outcome of a minimum-version search.

    ``version`` is ``None`` when no version in the searched range was
    compatible.
    """

    kind: Literal["resolved_version"] = "resolved_version"
    version: BareVersion | None = None
    target: str
    minimum_available: BareVersion
    maximum_available: BareVersion

    @classmethod
    def found(
        cls,
        version: BareVersion,
        target: str,
        minimum_available: BareVersion,
        maximum_available: BareVersion,
    ) -> ResolvedVersion:
        return cls(
            version=version,
            target=target,
            minimum_available=minimum_available,
            maximum_available=maximum_available,
        )

    @classmethod
    def none(
        cls,
        target: str,
        minimum_available: BareVersion,
        maximum_available: BareVersion,
    ) -> ResolvedVersion:
        return cls(
            target=target,
            minimum_available=minimum_available,
            maximum_available=maximum_available,
        )


class ListVariant(str, Enum):
    """How a dependency listing is organised."""

    DIRECT_DEPS = "direct_deps"
    ORDERED = "ordered"


class DependencyGraph(BaseModel):
    """Root package plus the minimum versions its dependencies declare."""

    model_config = ConfigDict(frozen=True)

    root_package: str
    dependencies: dict[str, BareVersion | None] = {}


class ListResult(MessageBase):
    """Dependency listing produced by the ``list`` command."""

    kind: Literal["list_result"] = "list_result"
    variant: ListVariant
    graph: DependencyGraph


class SetOutput(MessageBase):
    """The version written to a manifest by the ``set`` command."""

    kind: Literal["set_output"] = "set_output"
    version: BareVersion
    manifest_path: Path


class ShowOutput(MessageBase):
    """The version read from a manifest by the ``show`` command."""

    kind: Literal["show_output"] = "show_output"
    version: BareVersion
    manifest_path: Path


class VerifyResult(MessageBase):
    """Outcome of verifying a declared version against a toolchain."""

    kind: Literal["verify_result"] = "verify_result"
    toolchain: ToolchainSpec
    compatible: bool
    error: str | None = None

    @classmethod
    def compatible_with(cls, toolchain: ToolchainSpec) -> VerifyResult:
        return cls(toolchain=toolchain, compatible=True)

    @classmethod
    def incompatible_with(
        cls, toolchain: ToolchainSpec, error: str | None = None
    ) -> VerifyResult:
        return cls(toolchain=toolchain, compatible=False, error=error)


# ---------------------------------------------------------------------------
# Intermediate messages
# ---------------------------------------------------------------------------


class Progress(MessageBase):
    """Search progress: ``current`` out of ``search_space_size`` candidates."""

    kind: Literal["progress"] = "progress"
    current: int = Field(ge=0)
    search_space_size: int = Field(ge=0)
    iteration: int = Field(default=0, ge=0)


class Meta(MessageBase):
    """Tool name and version, emitted once at startup."""

    kind: Literal["meta"] = "meta"
    tool_name: str = "minver"
    tool_version: str


class CheckToolchain(MessageBase):
    """A toolchain is about to be probed."""

    kind: Literal["check_toolchain"] = "check_toolchain"
    toolchain: ToolchainSpec


Message = Annotated[
    Union[
        ResolvedVersion,
        ListResult,
        SetOutput,
        ShowOutput,
        VerifyResult,
        Progress,
        Meta,
        CheckToolchain,
    ],
    Field(discriminator="kind"),
]

# Registry for lookups by kind
MESSAGE_TYPE_MAP: dict[MessageKind, type[MessageBase]] = {
    MessageKind.RESOLVED_VERSION: ResolvedVersion,
    MessageKind.LIST_RESULT: ListResult,
    MessageKind.SET_OUTPUT: SetOutput,
    MessageKind.SHOW_OUTPUT: ShowOutput,
    MessageKind.VERIFY_RESULT: VerifyResult,
    MessageKind.PROGRESS: Progress,
    MessageKind.META: Meta,
    MessageKind.CHECK_TOOLCHAIN: CheckToolchain,
}
