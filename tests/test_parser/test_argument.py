import pytest

from clags.exceptions import ArgumentSpecError
from clags.parser import (
    Option,
    Positional,
    Switch,
    ValueKind,
    ValueList,
    help_switch,
    option,
    positional,
    positional_list,
    switch,
)


def test_positional_defaults():
    argument = positional("input_file", "the input file")
    assert isinstance(argument, Positional)
    assert argument.name == "input_file"
    assert argument.dest == "input_file"
    assert argument.kind is ValueKind.STRING
    assert argument.repeating is False
    assert argument.identity == "input_file"
    assert argument.get_usage_text() == "<input_file>"


def test_positional_dest_from_dashed_name():
    assert positional("input-file").dest == "input_file"


def test_positional_converter_implies_custom():
    argument = positional("mode", converter=lambda identity, token: token)
    assert argument.kind is ValueKind.CUSTOM


def test_positional_kind_from_string():
    assert positional("count", kind="uint8").kind is ValueKind.UINT8


@pytest.mark.parametrize("name", ["", "-input", "--input"])
def test_positional_invalid_name(name):
    with pytest.raises(ArgumentSpecError):
        positional(name)


def test_positional_custom_without_converter():
    with pytest.raises(ArgumentSpecError):
        positional("mode", kind=ValueKind.CUSTOM)


def test_positional_converter_with_other_kind():
    with pytest.raises(ArgumentSpecError):
        positional("mode", kind=ValueKind.INT8, converter=lambda i, t: t)


def test_positional_invalid_kind():
    with pytest.raises(ArgumentSpecError):
        positional("mode", kind="int64")


def test_positional_list():
    values = ValueList()
    argument = positional_list("files", "files to read", values=values)
    assert argument.repeating is True
    assert argument.values is values
    assert argument.get_usage_text() == "<files...>"

    with pytest.raises(ArgumentSpecError):
        positional_list("files", values=[])


def test_option():
    argument = option("-o", "--output", "the output file", field_name="FILE")
    assert isinstance(argument, Option)
    assert argument.dest == "output"
    assert argument.flags == ("-o", "--output")
    assert argument.identity == "--output"
    assert argument.matches("-o")
    assert argument.matches("--output")
    assert not argument.matches("--out")
    assert argument.get_flag_text() == "-o, --output <FILE>"


def test_option_short_only():
    argument = option("-q", None, field_name="LEVEL", kind=ValueKind.UINT8)
    assert argument.dest == "q"
    assert argument.identity == "-q"
    assert argument.split_assignment("-q=3") is None


def test_option_dest_from_long_flag():
    assert option(long="--dry-run").dest == "dry_run"
    assert option("-x", dest="custom").dest == "custom"


def test_option_split_assignment():
    argument = option("-o", "--output")
    assert argument.split_assignment("--output=x.txt") == "x.txt"
    assert argument.split_assignment("--output=") == ""
    assert argument.split_assignment("--output=a=b") == "a=b"
    assert argument.split_assignment("--outputx=1") is None
    assert argument.split_assignment("--output") is None


@pytest.mark.parametrize(
    "short, long",
    [
        (None, None),
        ("o", None),
        ("-oo", None),
        ("--", None),
        (None, "-output"),
        (None, "--"),
        (None, "--a=b"),
    ],
)
def test_invalid_flags(short, long):
    with pytest.raises(ArgumentSpecError):
        option(short, long)
    with pytest.raises(ArgumentSpecError):
        switch(short, long)


def test_option_empty_field_name():
    with pytest.raises(ArgumentSpecError):
        option("-o", field_name="")


@pytest.mark.parametrize("dest", ["1abc", "a-b", "a b"])
def test_invalid_dest(dest):
    with pytest.raises(ArgumentSpecError):
        option("-o", dest=dest)


def test_switch():
    argument = switch("-w", None, "print warnings")
    assert isinstance(argument, Switch)
    assert argument.dest == "w"
    assert argument.exit_on_match is False
    assert argument.get_flag_text() == "-w"

    with pytest.raises(ArgumentSpecError):
        switch("-w", exit_on_match="yes")


def test_help_switch():
    argument = help_switch()
    assert argument.flags == ("-h", "--help")
    assert argument.dest == "help"
    assert argument.exit_on_match is True


def test_entries_are_frozen():
    argument = positional("input")
    with pytest.raises(AttributeError):
        argument.name = "other"
