# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders help text from a Clags specification.

The output has a one-line synopsis followed by up to three sections:

    Usage: convert [OPTIONS] [FLAGS] <input> <algorithms...>
      Arguments:
        input            : the input file
        algorithms       : algorithms to run (custom...)
      Options:
        -o, --output <FILE> : the output file
      Flags:
        -h, --help       : Show this help message and exit.

Sections whose bucket is empty are left out entirely. Rendering skips the
cross-entry checks `parse()` applies, so even a specification with duplicate
names or a misplaced repeating positional can be displayed.
"""
from __future__ import annotations

from typing import Iterable

from rich.console import Console

from clags.config import UsageConfig
from clags.console import console as default_console
from clags.parser.argument import Argument, Option, Positional
from clags.parser.classify import ClassifiedSpec, classify


def _get_type_text(argument: Positional | Option, config: UsageConfig) -> str:
    if not config.show_types:
        return ""
    if not argument.kind.is_typed:
        return ""
    if isinstance(argument, Positional) and argument.repeating:
        return f" ({argument.kind}{config.list_marker})"
    return f" ({argument.kind})"


def _get_synopsis(program: str, spec: ClassifiedSpec, config: UsageConfig) -> str:
    parts = [f"Usage: {program}"]
    if spec.options:
        parts.append("[OPTIONS]")
    if spec.switches:
        parts.append("[FLAGS]")
    parts.extend(
        argument.get_usage_text(config.list_marker) for argument in spec.positionals
    )
    return " ".join(parts)


def _format_row(left: str, description: str, config: UsageConfig) -> str:
    return f"{' ' * config.indent}{left:<{config.column_width}}{config.separator}{description}"


def _render_sections(
    program: str, spec: ClassifiedSpec, config: UsageConfig
) -> list[tuple[str, str | None]]:
    """Return `(line, style)` pairs; headings carry a style for Rich output."""
    heading = " " * config.section_indent
    lines: list[tuple[str, str | None]] = [
        (_get_synopsis(program, spec, config), "bold")
    ]
    if spec.positionals:
        lines.append((f"{heading}Arguments:", "bold"))
        for argument in spec.positionals:
            description = argument.description + _get_type_text(argument, config)
            lines.append((_format_row(argument.name, description, config), None))
    if spec.options:
        lines.append((f"{heading}Options:", "bold"))
        for argument in spec.options:
            description = argument.description + _get_type_text(argument, config)
            lines.append(
                (_format_row(argument.get_flag_text(), description, config), None)
            )
    if spec.switches:
        lines.append((f"{heading}Flags:", "bold"))
        for argument in spec.switches:
            lines.append(
                (_format_row(argument.get_flag_text(), argument.description, config), None)
            )
    lines.append(("", None))
    return lines


def render_usage(
    program: str,
    specification: Iterable[Argument],
    *,
    config: UsageConfig | None = None,
) -> str:
    """
    Render the usage text for `specification` as plain text.

    Args:
        program (str): Program name shown in the synopsis.
        specification (Iterable[Argument]): The declared arguments.
        config (UsageConfig | None): Layout settings.

    Returns:
        str: The usage text, ending with a blank line.
    """
    lines = _render_sections(
        program, classify(specification, validate=False), config or UsageConfig()
    )
    return "\n".join(line for line, _ in lines) + "\n"


def print_usage(
    program: str,
    specification: Iterable[Argument],
    *,
    config: UsageConfig | None = None,
    console: Console | None = None,
) -> None:
    """Print the usage text for `specification` to standard output using Rich."""
    console = console or default_console
    for line, style in _render_sections(
        program, classify(specification, validate=False), config or UsageConfig()
    ):
        console.print(line, style=style, markup=False, emoji=False)
