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

import io

from rich.console import Console
from rich.markdown import Markdown

RENDER_WIDTH = 100


def release_notes_markdown(tag_name: str, body: str) -> str:
    return f"# Release Notes for {tag_name}\n{body}"


def render_release_notes(tag_name: str, body: str, styled: bool) -> str:
    """Render the release notes of tag_name as terminal text.

    With styled=False the output carries no ANSI escape codes, which is
    what non-interactive terminals (and Windows consoles) want.
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=RENDER_WIDTH,
        force_terminal=styled,
        no_color=not styled,
        color_system="standard" if styled else None,
    )
    console.print(Markdown(release_notes_markdown(tag_name, body)))
    return buffer.getvalue()
