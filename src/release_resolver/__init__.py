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

from .errors import NotFoundError, ParseError, ReleaseResolverError, SourceError
from .tags import (
    DEFAULT_LINE_PREFIX,
    ReleaseResolver,
    filter_tag_line,
    is_valid_tag,
    latest_pre_release,
    latest_stable,
    list_versions_descending,
)
from .version import (
    Prerelease,
    SemanticVersion,
    compare,
    is_pre_release,
    is_release,
    parse,
    sort_descending,
)

__all__ = [
    "DEFAULT_LINE_PREFIX",
    "NotFoundError",
    "ParseError",
    "Prerelease",
    "ReleaseResolver",
    "ReleaseResolverError",
    "SemanticVersion",
    "SourceError",
    "compare",
    "filter_tag_line",
    "is_pre_release",
    "is_release",
    "is_valid_tag",
    "latest_pre_release",
    "latest_stable",
    "list_versions_descending",
    "parse",
    "sort_descending",
]
