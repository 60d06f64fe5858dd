"""Deterministic terminal colors for pod name prefixes."""

from __future__ import annotations

from kubecronlogs.constants.values import (
    ANSI_BOLD_RESET,
    ANSI_FOREGROUND_BASE,
    ANSI_POD_NAME_TEMPLATE,
    ANSI_RESET,
    PALETTE_SIZE,
)


def color_index_for(name: str) -> int:
    """Map a pod name onto a palette index in ``range(PALETTE_SIZE)``.

    Sums ``c**2 / 2 + 1`` over the code points of the name, truncates the
    float total and reduces it modulo the palette size. The empty name maps
    to index 0. Different names may share an index.
    """
    total = 0.0
    for char in name:
        total += (ord(char) ** 2 / 2) + 1
    return int(total) % PALETTE_SIZE


def color_for(name: str) -> int:
    """Return the ANSI foreground code (31-36) assigned to a pod name."""
    return ANSI_FOREGROUND_BASE + color_index_for(name)


def format_log_line(pod_name: str, line: str) -> str:
    """Render one log line with its colored pod name prefix."""
    prefix = ANSI_POD_NAME_TEMPLATE.format(color=color_for(pod_name))
    return f"{prefix}{pod_name}{ANSI_BOLD_RESET} {ANSI_RESET}{line}\n"
