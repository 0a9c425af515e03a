# Clags Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the Clags parser.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they are
not swallowed by `except Exception` blocks in converters or caller code.

Signals:
- ExitSignal: An exit-on-match switch (e.g. `--help`) ended parsing early.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Clags.

    These are not errors. They stop the token loop without marking the parse
    as failed.
    """


class ExitSignal(FlowSignal):
    """Raised when a switch marked `exit_on_match` is matched."""

    def __init__(self, dest: str, message: str = "Exit switch matched."):
        super().__init__(message)
        self.dest = dest
