"""
Clags Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import (
    Argument,
    FlagArgument,
    Option,
    Positional,
    Switch,
    help_switch,
    option,
    positional,
    positional_list,
    switch,
)
from .argument_parser import ArgumentParser, parse, parse_or_raise
from .classify import ClassifiedSpec, classify
from .converters import convert_value
from .result import ParseResult
from .usage import print_usage, render_usage
from .value_kind import ValueKind
from .value_list import ValueList

__all__ = [
    "Argument",
    "ArgumentParser",
    "ClassifiedSpec",
    "FlagArgument",
    "Option",
    "ParseResult",
    "Positional",
    "Switch",
    "ValueKind",
    "ValueList",
    "classify",
    "convert_value",
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
