"""Predefined level tables and their colours."""

from __future__ import annotations


def cli_levels() -> dict[str, int]:
    """Levels used by command-line tools."""
    return {
        "error": 0,
        "warn": 1,
        "help": 2,
        "data": 3,
        "info": 4,
        "debug": 5,
        "prompt": 6,
        "verbose": 7,
        "input": 8,
        "silly": 9,
    }


def cli_colors() -> dict[str, str]:
    """Colours for the command-line levels."""
    return {
        "error": "red",
        "warn": "yellow",
        "help": "cyan",
        "data": "grey",
        "info": "green",
        "debug": "blue",
        "prompt": "grey",
        "verbose": "cyan",
        "input": "grey",
        "silly": "magenta",
    }


def default_levels() -> dict[str, int]:
    """The default level table."""
    return {
        "error": 0,
        "warn": 1,
        "info": 2,
        "debug": 3,
        "trace": 4,
    }


def default_colors() -> dict[str, str]:
    """Colours for the default levels."""
    return {
        "error": "red",
        "warn": "yellow",
        "info": "green",
        "debug": "blue",
        "trace": "magenta",
    }


def syslog_levels() -> dict[str, int]:
    """Syslog severity levels."""
    return {
        "emerg": 0,
        "alert": 1,
        "crit": 2,
        "error": 3,
        "warning": 4,
        "notice": 5,
        "info": 6,
        "debug": 7,
    }


def syslog_colors() -> dict[str, str]:
    """Colours for the syslog levels."""
    return {
        "emerg": "red",
        "alert": "yellow",
        "crit": "red",
        "error": "red",
        "warning": "red",
        "notice": "yellow",
        "info": "green",
        "debug": "blue",
    }