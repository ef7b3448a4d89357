"""Launching the user's editor on the message file."""

import logging
import os
import shlex
import subprocess

from . import EditorError

logger = logging.getLogger(__name__)

# Editors that understand "-c 'set ft=gitcommit'"
VIM_EDITORS = frozenset({"vim", "gvim", "mvim"})


def build_editor_command(editor: str, path: str) -> list[str]:
    """
    Build the argv used to edit path.

    The editor string may carry its own arguments (e.g. "code --wait").
    Vim variants get the gitcommit filetype so comment lines are highlighted.

    Raises:
        EditorError: If the editor string is empty or cannot be parsed
    """
    try:
        cmd = shlex.split(editor)
    except ValueError as e:
        raise EditorError(f"Cannot parse editor command: {editor}") from e
    if not cmd:
        raise EditorError("No editor configured")

    if os.path.basename(cmd[0]) in VIM_EDITORS:
        cmd += ["-c", "set ft=gitcommit"]
    cmd.append(path)
    return cmd


def run_interactive(cmd: list[str]) -> None:
    """
    Run cmd in the foreground, attached to this terminal, until it exits.

    Raises:
        EditorError: If the command cannot be started or exits non-zero
    """
    if not cmd:
        raise EditorError("No editor configured")

    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd)
    except FileNotFoundError:
        raise EditorError(f"Editor not found: {cmd[0]}") from None

    if result.returncode != 0:
        raise EditorError(f"Editor {cmd[0]} exited with status {result.returncode}")
