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

import os
import sys
from typing import NoReturn

_GITHUB_COMMANDS = {
    "debug": "debug",
    "info": "notice",
    "warning": "warning",
    "error": "error",
    "success": "notice",
}

_LOCAL_PREFIXES = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARNING",
    "error": "ERROR",
    "success": "SUCCESS",
}

_verbose = False


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


def set_verbose(enabled: bool) -> None:
    """Show debug messages locally (GitHub Actions always receives them)."""
    global _verbose
    _verbose = enabled


class Logger:
    """Minimal logger that prints locally and emits annotations on GitHub Actions.

    Log lines go to stderr so that command results on stdout stay
    machine-readable (e.g. `latest` prints just the version).
    """

    def __init__(self, name: str):
        self.name = name
        self.warnings: list[str] = []

    def _print(self, prefix: str, msg: str) -> None:
        if is_running_in_github_actions():
            command = _GITHUB_COMMANDS.get(prefix, prefix)
            print(f"::{command}::{self.name} {msg}", file=sys.stderr)
            return

        if prefix == "debug" and not _verbose:
            return
        pretty_prefix = _LOCAL_PREFIXES.get(prefix, prefix)
        print(f"{pretty_prefix}: {self.name} {msg}", file=sys.stderr)

    def debug(self, msg: str) -> None:
        self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def ok(self, msg: str) -> None:
        self._print("success", msg)

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)
        self._print("warning", msg)

    def fatal(self, msg: str) -> NoReturn:
        self._print("error", msg)
        raise SystemExit(1)
