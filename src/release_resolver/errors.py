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


class ReleaseResolverError(Exception):
    """Base class for all errors raised while resolving release tags."""


class ParseError(ReleaseResolverError, ValueError):
    """A tag that should be a semantic version does not match the grammar."""

    def __init__(self, raw: str, reason: str = "not a semantic version tag"):
        super().__init__(f"'{raw}' is {reason}")
        self.raw = raw


class NotFoundError(ReleaseResolverError, LookupError):
    """The input was well-formed but holds nothing of the requested kind."""


class SourceError(ReleaseResolverError, RuntimeError):
    """Retrieving tags or release notes from the remote source failed."""
