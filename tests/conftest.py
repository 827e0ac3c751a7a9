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
from unittest.mock import MagicMock

import github
import pytest

from src.release_resolver import gh_logging
from src.release_resolver.github_wrapper import GithubWrapper

# Tags of the v2 line mixed with an older major version.
SCENARIO_TAGS = ["v2.1.0", "v2.0.0-rc.1", "v1.9.0", "v2.2.0"]


@pytest.fixture(autouse=True)
def local_logging(monkeypatch: pytest.MonkeyPatch):
    """Log in local format, quietly, regardless of where the tests run."""
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    monkeypatch.setattr(gh_logging, "_verbose", False)


def make_tag(name: str) -> MagicMock:
    tag = MagicMock()
    # `name` is reserved in the MagicMock constructor
    tag.name = name
    return tag


def make_github_wrapper(
    tag_names: list[str] | None = None,
    release_bodies: dict[str, str | None] | None = None,
    org_and_repo: str = "org/repo",
) -> GithubWrapper:
    """GithubWrapper whose repository is served from memory.

    Tags absent from release_bodies behave like GitHub's 404.
    """
    bodies = release_bodies or {}

    def get_release(tag_name: str) -> MagicMock:
        if tag_name not in bodies:
            raise github.GithubException(404, {"message": "Not Found"})
        release = MagicMock()
        release.body = bodies[tag_name]
        return release

    repo = MagicMock()
    repo.get_tags.return_value = [make_tag(n) for n in tag_names or []]
    repo.get_release.side_effect = get_release

    wrapper = GithubWrapper(None, org_and_repo)
    wrapper.gh = MagicMock()
    wrapper.gh.get_repo.return_value = repo
    return wrapper
