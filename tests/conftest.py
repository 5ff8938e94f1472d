"""Shared test fixtures for minver."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from minver.models.events import Event
from minver.models.messages import (
    DependencyGraph,
    ListResult,
    ListVariant,
    ResolvedVersion,
    VerifyResult,
)
from minver.models.versions import BareVersion, ToolchainSpec
from minver.reporting.handlers.minimal import MinimalOutputHandler
from minver.reporting.sinks import BufferSink


@pytest.fixture
def success_sink() -> BufferSink:
    """Provide an in-memory success sink."""
    return BufferSink(name="success")


@pytest.fixture
def failure_sink() -> BufferSink:
    """Provide an in-memory failure sink."""
    return BufferSink(name="failure")


@pytest.fixture
def handler(success_sink: BufferSink, failure_sink: BufferSink) -> MinimalOutputHandler:
    """Provide a strict MinimalOutputHandler wired to the in-memory sinks."""
    return MinimalOutputHandler(success_sink, failure_sink, strict=True)


@pytest.fixture
def toolchain() -> ToolchainSpec:
    return ToolchainSpec(version=BareVersion.parse("1.2.3"), target="test_target")


# ---------------------------------------------------------------------------
# Event factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_resolved_event() -> Callable[..., Event]:
    """Factory fixture: build a ResolvedVersion event (``None`` → not found)."""

    def _factory(version: str | None = "1.10.100", target: str = "my-target") -> Event:
        minimum = BareVersion.parse("1.0.0")
        maximum = BareVersion.parse("2.0.0")
        if version is None:
            message = ResolvedVersion.none(target, minimum, maximum)
        else:
            message = ResolvedVersion.found(
                BareVersion.parse(version), target, minimum, maximum
            )
        return Event.from_message(message)

    return _factory


@pytest.fixture
def make_list_event() -> Callable[..., Event]:
    """Factory fixture: build a ListResult event."""

    def _factory(
        variant: ListVariant = ListVariant.DIRECT_DEPS,
        dependencies: dict[str, BareVersion | None] | None = None,
    ) -> Event:
        graph = DependencyGraph(
            root_package="hello_world", dependencies=dependencies or {}
        )
        return Event.from_message(ListResult(variant=variant, graph=graph))

    return _factory


@pytest.fixture
def make_verify_event(toolchain: ToolchainSpec) -> Callable[..., Event]:
    """Factory fixture: build a VerifyResult event."""

    def _factory(compatible: bool = True, error: str | None = None) -> Event:
        if compatible:
            return Event.from_message(VerifyResult.compatible_with(toolchain))
        return Event.from_message(VerifyResult.incompatible_with(toolchain, error))

    return _factory


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    return tmp_path / "Cargo.toml"


@pytest.fixture(autouse=True)
def _restore_minver_logger():
    """Undo any handler/propagation changes made by ``configure_logging``."""
    logger = logging.getLogger("minver")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
