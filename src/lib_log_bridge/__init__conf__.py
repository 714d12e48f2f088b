"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_bridge"
title = "Bridge a severity-leveled logging contract onto Python's hierarchical logging backend"
version = "0.1.0"
shell_command = "lib_log_bridge"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Write the metadata banner through ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_bridge:\\n\\n'
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n\n")
    writer("".join(f"    {label:<{pad}} = {value}\n" for label, value in fields))


__all__ = ["print_info"]
