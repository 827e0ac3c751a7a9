# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import total_ordering

import semver

from .errors import ParseError

VERSION_PREFIX = "v"

_NUM = r"0|[1-9][0-9]*"
_LABEL = r"[A-Za-z][0-9A-Za-z-]*"
_LABEL_RE = re.compile(_LABEL)
_VERSION_RE = re.compile(
    rf"(?P<major>{_NUM})\.(?P<minor>{_NUM})\.(?P<patch>{_NUM})"
    rf"(?:-(?P<label>{_LABEL})(?:\.(?P<number>{_NUM}))?)?"
)


def strip_prefix(raw: str) -> str:
    """Remove a single leading 'v' (e.g. 'v2.1.0' -> '2.1.0')."""
    if raw.startswith(VERSION_PREFIX):
        return raw[len(VERSION_PREFIX) :]
    return raw


@dataclass(frozen=True)
class Prerelease:
    label: str
    number: int | None = None

    def __post_init__(self) -> None:
        if not _LABEL_RE.fullmatch(self.label):
            raise ValueError(f"Invalid pre-release label: {self.label!r}")
        if self.number is not None and self.number < 0:
            raise ValueError("Pre-release number must be non-negative")

    def __str__(self) -> str:
        if self.number is None:
            return self.label
        return f"{self.label}.{self.number}"


@total_ordering
@dataclass(frozen=True)
class SemanticVersion:
    """A parsed version tag.

    `original` is the tag it was parsed from, without the leading 'v'.
    It does not take part in equality, hashing or ordering.
    """

    major: int
    minor: int
    patch: int
    prerelease: Prerelease | None = None
    original: str = field(default="", compare=False, repr=False)

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise ValueError("major, minor and patch must be non-negative")
        if not self.original:
            object.__setattr__(self, "original", self._canonical())

    def _canonical(self) -> str:
        core = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is None:
            return core
        return f"{core}-{self.prerelease}"

    @property
    def semver(self) -> semver.Version:
        prerelease = str(self.prerelease) if self.prerelease else None
        return semver.Version(self.major, self.minor, self.patch, prerelease)

    @property
    def is_release(self) -> bool:
        return self.prerelease is None

    @property
    def is_pre_release(self) -> bool:
        return not self.is_release

    def __lt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) < 0

    def __str__(self) -> str:
        return self._canonical()


def parse(raw: str) -> SemanticVersion:
    """Parse a tag such as 'v2.0.0' or 'v2.0.0-rc.1'.

    Raises ParseError if the tag (minus one leading 'v') is not
    MAJOR.MINOR.PATCH, optionally followed by '-label' or '-label.number'.
    """
    if not isinstance(raw, str):
        raise TypeError("Version must be a string")

    normalized = strip_prefix(raw)
    m = _VERSION_RE.fullmatch(normalized)
    if not m:
        raise ParseError(raw)

    prerelease = None
    if m["label"]:
        number = m["number"]
        prerelease = Prerelease(m["label"], int(number) if number else None)

    return SemanticVersion(
        major=int(m["major"]),
        minor=int(m["minor"]),
        patch=int(m["patch"]),
        prerelease=prerelease,
        original=normalized,
    )


def compare(a: SemanticVersion, b: SemanticVersion) -> int:
    """Return -1, 0 or 1 as a is older than, equal to or newer than b.

    Follows semantic versioning precedence: a release outranks its own
    pre-releases, labels compare lexically, pre-release numbers numerically.
    """
    return a.semver.compare(b.semver)


def is_release(v: SemanticVersion) -> bool:
    return v.is_release


def is_pre_release(v: SemanticVersion) -> bool:
    return v.is_pre_release


def sort_descending(versions: Iterable[SemanticVersion]) -> list[SemanticVersion]:
    """Sort versions newest first."""
    return sorted(versions, reverse=True)
