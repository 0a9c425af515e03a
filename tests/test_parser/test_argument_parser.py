import pytest
from rich.console import Console

from clags.exceptions import ArgumentSpecError, UnknownOptionError
from clags.parser import ArgumentParser, ValueKind, positional


def test_str():
    """Test the string representation of ArgumentParser."""
    parser = ArgumentParser(program="prog")
    assert str(parser) == "ArgumentParser(args=1, positional=0, options=0, switches=1)"

    parser.add_positional("input", "the input file")
    parser.add_option("-o", "--output", "the output file", field_name="FILE")
    parser.add_switch("-w", None, "print warnings")
    assert str(parser) == "ArgumentParser(args=4, positional=1, options=1, switches=2)"
    assert repr(parser) == str(parser)


def test_parse_args():
    parser = ArgumentParser(program="prog")
    parser.add_positional("input")
    parser.add_option("-l", "--level", kind=ValueKind.INT8)
    parser.add_positional_list("rest", kind="uint32")

    result = parser.parse_args(["in.txt", "--level=-3", "1", "2"])
    assert result.ok
    assert result["input"] == "in.txt"
    assert result["level"] == -3
    assert result["rest"] == [1, 2]


def test_parse_args_help():
    parser = ArgumentParser(program="prog")
    parser.add_positional("input")
    result = parser.parse_args(["-h"])
    assert result.ok
    assert result.help_requested


def test_without_help():
    parser = ArgumentParser(program="prog", add_help=False)
    parser.add_positional("input")
    with pytest.raises(UnknownOptionError):
        parser.parse_args_or_raise(["--help"])


def test_parse_args_reports_to_error_console():
    error_console = Console(record=True, width=120)
    parser = ArgumentParser(program="prog", error_console=error_console)
    parser.add_positional("input")
    result = parser.parse_args([])
    assert not result
    assert "[ERROR] Missing required arguments: <input>!" in error_console.export_text()


def test_parse_args_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["tool", "in.txt"])
    parser = ArgumentParser()
    parser.add_positional("input")
    assert parser.program_name == "tool"
    assert parser.parse_args()["input"] == "in.txt"


def test_duplicate_registration():
    parser = ArgumentParser(program="prog")
    parser.add_option("-o", "--output")
    with pytest.raises(ArgumentSpecError):
        parser.add_switch("-o")
    with pytest.raises(ArgumentSpecError):
        parser.add_switch("-h", dest="other_help")
    assert parser.get_argument("o") is None
    assert parser.get_argument("output") is not None


def test_repeating_positional_must_stay_last():
    parser = ArgumentParser(program="prog")
    parser.add_positional_list("files")
    with pytest.raises(ArgumentSpecError):
        parser.add_positional("mode")


def test_add_argument_prebuilt():
    parser = ArgumentParser(program="prog", add_help=False)
    argument = parser.add_argument(positional("input"))
    assert parser.specification == (argument,)
    with pytest.raises(ArgumentSpecError):
        parser.add_argument("input")


def test_render_and_print_usage():
    console = Console(record=True, width=120)
    parser = ArgumentParser(program="prog", console=console)
    parser.add_positional("input", "the input file")
    text = parser.render_usage()
    assert text.startswith("Usage: prog [FLAGS] <input>\n")
    parser.print_usage()
    assert console.export_text() == text
