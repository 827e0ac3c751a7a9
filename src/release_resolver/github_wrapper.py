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

from dataclasses import dataclass

import github
import requests

from .errors import NotFoundError, SourceError
from .gh_logging import Logger

log = Logger(__name__)

DEFAULT_REPO = "wailsapp/wails"


@dataclass
class GitHubTag:
    org_and_repo: str
    name: str


def _decode_tag(org_and_repo: str, tag: object) -> GitHubTag:
    name = getattr(tag, "name", None)
    if not isinstance(name, str):
        raise SourceError(
            f"Tag of {org_and_repo} has a missing or non-string name: {name!r}"
        )
    return GitHubTag(org_and_repo=org_and_repo, name=name)


class GithubWrapper:
    """Wrapper around GitHub API for fetching tags and release notes."""

    def __init__(self, github_token: str | None, org_and_repo: str = DEFAULT_REPO):
        auth = github.Auth.Token(github_token) if github_token else None
        self.gh = github.Github(auth=auth)
        self.org_and_repo = org_and_repo

    def _repo(self):
        return self.gh.get_repo(self.org_and_repo)

    def get_tags(self) -> list[GitHubTag]:
        """Fetch all tags of the repository, in the order GitHub lists them."""
        try:
            raw_tags = list(self._repo().get_tags())
        except (github.GithubException, requests.exceptions.RequestException) as e:
            raise SourceError(
                f"Error fetching tags for {self.org_and_repo}: {e}"
            ) from e

        tags = [_decode_tag(self.org_and_repo, t) for t in raw_tags]
        log.debug(f"Found {len(tags)} tags in {self.org_and_repo}")
        return tags

    def get_tag_names(self) -> list[str]:
        return [t.name for t in self.get_tags()]

    def get_release_notes(self, tag_name: str) -> str:
        """Fetch the markdown body of the release published for tag_name.

        Raises NotFoundError if there is no such release or it has no body.
        """
        try:
            release = self._repo().get_release(tag_name)
        except github.GithubException as e:
            if e.status == 404:
                raise NotFoundError(
                    f"no release notes found for {self.org_and_repo}@{tag_name}"
                ) from e
            raise SourceError(
                f"Error fetching release {tag_name} for {self.org_and_repo}: {e}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise SourceError(
                f"Error fetching release {tag_name} for {self.org_and_repo}: {e}"
            ) from e

        body = release.body
        if not body:
            raise NotFoundError(
                f"no release notes found for {self.org_and_repo}@{tag_name}"
            )
        if not isinstance(body, str):
            raise SourceError(
                f"Release {tag_name} of {self.org_and_repo} has a non-string body"
            )
        return body
