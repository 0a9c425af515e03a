# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Clags output.

`console` writes usage text to standard output, `error_console` writes parse
diagnostics to standard error.
"""
from rich.console import Console

console = Console(highlight=False, soft_wrap=True, emoji=False)
error_console = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)
