"""Version value types — bare versions and toolchain specs."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from minver.exceptions import VersionParseError

_BARE_VERSION_RE = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?$")


class BareVersion(BaseModel):
    """A ``major.minor`` or ``major.minor.patch`` version.

    The textual form keeps the number of components it was built with:
    ``BareVersion(major=1, minor=20)`` renders as ``1.20``, never ``1.20.0``.
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int | None = Field(default=None, ge=0)

    @classmethod
    def parse(cls, text: str) -> BareVersion:
        """Parse ``"1.20"`` or ``"1.40.3"`` into a BareVersion.

        Raises
        ------
        VersionParseError
            If *text* is not two or three dot-separated integers.
        """
        match = _BARE_VERSION_RE.match(text.strip())
        if match is None:
            raise VersionParseError(f"Invalid bare version: {text!r}")
        major, minor, patch = match.groups()
        return cls(
            major=int(major),
            minor=int(minor),
            patch=int(patch) if patch is not None else None,
        )

    @property
    def is_three_component(self) -> bool:
        return self.patch is not None

    def as_tuple(self) -> tuple[int, int, int]:
        """Return ``(major, minor, patch)`` with a missing patch read as 0."""
        return (self.major, self.minor, self.patch or 0)

    def __str__(self) -> str:
        if self.patch is None:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.patch}"


class ToolchainSpec(BaseModel):
    """A toolchain version paired with the target it was checked against."""

    model_config = ConfigDict(frozen=True)

    version: BareVersion
    target: str

    def __str__(self) -> str:
        return f"{self.version}-{self.target}"
