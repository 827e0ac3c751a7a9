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

import argparse
import os
import subprocess
import sys

from .errors import ReleaseResolverError
from .gh_logging import Logger, set_verbose
from .github_wrapper import DEFAULT_REPO, GithubWrapper
from .notes import render_release_notes
from .tags import DEFAULT_LINE_PREFIX, ReleaseResolver
from .version import strip_prefix

log = Logger(__name__)


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve the latest release and pre-release tags of a project."
    )
    parser.add_argument(
        "--github-token",
        type=str,
        default=None,
        help=(
            "GitHub token for accessing the GitHub API (avoids rate limits); "
            "defaults to $GITHUB_TOKEN or `gh auth token`."
        ),
    )
    parser.add_argument(
        "--repo",
        type=str,
        default=os.getenv("RELEASE_RESOLVER_REPO", DEFAULT_REPO),
        help="GitHub repository as ORG/REPO; defaults to $RELEASE_RESOLVER_REPO "
        f"or {DEFAULT_REPO}.",
    )
    parser.add_argument(
        "--line",
        type=str,
        default=DEFAULT_LINE_PREFIX,
        help=f"Only consider tags starting with this prefix (default: "
        f"{DEFAULT_LINE_PREFIX}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Print debug messages.")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="List all versions, latest first.")
    commands.add_parser("latest", help="Print the latest stable release.")
    commands.add_parser("latest-pre", help="Print the latest pre-release.")

    validate = commands.add_parser("validate", help="Check that a tag exists.")
    validate.add_argument("tag")

    notes = commands.add_parser("notes", help="Print the release notes of a tag.")
    notes.add_argument("tag")
    style = notes.add_mutually_exclusive_group()
    style.add_argument(
        "--plain",
        dest="styled",
        action="store_false",
        default=None,
        help="Render without colors (default on Windows).",
    )
    style.add_argument(
        "--styled",
        dest="styled",
        action="store_true",
        default=None,
        help="Render with terminal styling (default elsewhere).",
    )
    return parser.parse_args(args)


def get_token(args: argparse.Namespace) -> str | None:
    """Get GitHub API token from CLI, environment, or gh CLI tool.

    Tries sources in order:
    1. --github-token CLI argument
    2. GITHUB_TOKEN environment variable
    3. Output of `gh auth token`
    """
    if args.github_token:
        log.debug("Using GitHub token from command-line argument.")
        return args.github_token
    elif token := os.getenv("GITHUB_TOKEN"):
        log.debug("Using GitHub token from environment variable.")
        return token
    else:
        try:
            token = (
                subprocess.check_output(["gh", "auth", "token"]).decode("utf-8").strip()
            )
            log.debug("Using GitHub token from `gh auth token`.")
            return token
        except (subprocess.CalledProcessError, FileNotFoundError):
            log.debug("No GitHub token provided; proceeding without one.")
            return None


def use_styled_output(args: argparse.Namespace) -> bool:
    if args.styled is not None:
        return args.styled
    return sys.platform != "win32"


def run_command(
    args: argparse.Namespace, gh: GithubWrapper, resolver: ReleaseResolver
) -> None:
    if args.command == "list":
        for version in resolver.list_versions_descending():
            print(version)
    elif args.command == "latest":
        print(resolver.latest_stable())
    elif args.command == "latest-pre":
        print(resolver.latest_pre_release())
    elif args.command == "validate":
        if resolver.is_valid_tag(args.tag):
            log.ok(f"{args.tag} is a valid tag")
        else:
            log.warning(f"{args.tag} is not a known tag of {args.repo}")
    elif args.command == "notes":
        body = gh.get_release_notes(args.tag)
        print(render_release_notes(args.tag, body, use_styled_output(args)), end="")


def main(args: list[str]) -> None:
    """Main entry point for the release resolver.

    Fetches the tags of the repository and answers the requested command.
    """
    p = parse_args(args)
    set_verbose(p.verbose)
    log.warnings.clear()

    if p.command == "validate" and not strip_prefix(p.tag):
        log.fatal("Tag to validate must not be empty.")

    gh = GithubWrapper(get_token(p), p.repo)
    resolver = ReleaseResolver(gh.get_tag_names, p.line)

    try:
        run_command(p, gh, resolver)
    except ReleaseResolverError as e:
        log.fatal(str(e))

    if log.warnings:
        # If any warnings were issued, exit with non-zero code
        log.fatal(f"Completed with {len(log.warnings)} warnings.")


def cli() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    cli()
