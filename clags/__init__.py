"""
Clags Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .config import UsageConfig
from .exceptions import ArgumentParseError, ArgumentSpecError, ClagsError, ErrorKind
from .parser import (
    ArgumentParser,
    ParseResult,
    ValueKind,
    ValueList,
    help_switch,
    option,
    parse,
    parse_or_raise,
    positional,
    positional_list,
    print_usage,
    render_usage,
    switch,
)

logger = logging.getLogger("clags")

__all__ = [
    "ArgumentParseError",
    "ArgumentParser",
    "ArgumentSpecError",
    "ClagsError",
    "ErrorKind",
    "ParseResult",
    "UsageConfig",
    "ValueKind",
    "ValueList",
    "help_switch",
    "option",
    "parse",
    "parse_or_raise",
    "positional",
    "positional_list",
    "print_usage",
    "render_usage",
    "switch",
]
