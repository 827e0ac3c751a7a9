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

from collections.abc import Callable, Iterable

from .errors import NotFoundError
from .gh_logging import Logger
from .version import SemanticVersion, parse, sort_descending, strip_prefix

log = Logger(__name__)

DEFAULT_LINE_PREFIX = "v2"

# Anything that yields raw tag names, e.g. GithubWrapper.get_tag_names
TagSource = Callable[[], Iterable[str]]


def filter_tag_line(raw_tags: Iterable[str], line_prefix: str) -> list[str]:
    """Keep only the tags of one version line (e.g. 'v2'), in input order."""
    result: list[str] = []
    for tag in raw_tags:
        if tag.startswith(line_prefix):
            result.append(tag)
        else:
            log.debug(f"Ignoring tag {tag} outside of line {line_prefix}")
    return result


def list_versions_descending(
    raw_tags: Iterable[str], line_prefix: str = DEFAULT_LINE_PREFIX
) -> list[SemanticVersion]:
    """Parse all tags of the line and sort them, highest (latest) first.

    A malformed tag within the line raises ParseError; it is never skipped.
    """
    versions = [parse(tag) for tag in filter_tag_line(raw_tags, line_prefix)]
    return sort_descending(versions)


def latest_stable(
    raw_tags: Iterable[str], line_prefix: str = DEFAULT_LINE_PREFIX
) -> SemanticVersion:
    for version in list_versions_descending(raw_tags, line_prefix):
        if version.is_release:
            return version
    raise NotFoundError("no release tag found")


def latest_pre_release(
    raw_tags: Iterable[str], line_prefix: str = DEFAULT_LINE_PREFIX
) -> SemanticVersion:
    for version in list_versions_descending(raw_tags, line_prefix):
        if version.is_pre_release:
            return version
    raise NotFoundError("no prerelease tag found")


def _normalize_candidate(candidate: str) -> str:
    wanted = strip_prefix(candidate)
    if not wanted:
        raise ValueError(f"Tag to validate must not be empty: {candidate!r}")
    return wanted


def is_valid_tag(
    candidate: str, raw_tags: Iterable[str], line_prefix: str = DEFAULT_LINE_PREFIX
) -> bool:
    """Check whether candidate (with or without 'v') is one of the known tags."""
    wanted = _normalize_candidate(candidate)
    return any(
        str(version) == wanted
        for version in list_versions_descending(raw_tags, line_prefix)
    )


class ReleaseResolver:
    """Answers version questions about the tags supplied by a tag source.

    The source is queried on every call; nothing is cached between calls.
    Errors raised by the source propagate unchanged.
    """

    def __init__(self, tag_source: TagSource, line_prefix: str = DEFAULT_LINE_PREFIX):
        self.tag_source = tag_source
        self.line_prefix = line_prefix

    def _fetch(self) -> list[str]:
        tags = list(self.tag_source())
        log.debug(f"Fetched {len(tags)} tags")
        return tags

    def list_versions_descending(self) -> list[SemanticVersion]:
        return list_versions_descending(self._fetch(), self.line_prefix)

    def latest_stable(self) -> SemanticVersion:
        return latest_stable(self._fetch(), self.line_prefix)

    def latest_pre_release(self) -> SemanticVersion:
        return latest_pre_release(self._fetch(), self.line_prefix)

    def is_valid_tag(self, candidate: str) -> bool:
        _normalize_candidate(candidate)
        return is_valid_tag(candidate, self._fetch(), self.line_prefix)
