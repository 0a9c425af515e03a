"""Bind an input file, an output file and a couple of flags."""
import sys

from clags import help_switch, option, parse, positional, print_usage, switch

specification = [
    positional("input_file", "the input file"),
    positional("algorithm", "the algorithm to use"),
    option("-o", "--output", "the output file", field_name="FILE"),
    option("-q", "--quality", "the sample quality", field_name="LEVEL", kind="uint8"),
    switch("-w", None, "print warnings"),
    help_switch(),
]


def main() -> int:
    result = parse(sys.argv, specification)
    if not result:
        print_usage(sys.argv[0], specification)
        return 1
    if result.help_requested:
        print_usage(sys.argv[0], specification)
        return 0
    print(f"input: {result['input_file']}, output: {result['output']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
