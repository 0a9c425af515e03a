"""Collect a list of algorithms with a custom converter."""
import sys

from clags import ArgumentParser, ValueList


def algorithm(identity: str, token: str) -> str:
    if token not in ("FIFO", "LIFO"):
        raise ValueError(f"{identity} must be FIFO or LIFO")
    return token


def main() -> int:
    algorithms = ValueList()
    parser = ArgumentParser()
    parser.add_positional("input_file", "the input file")
    parser.add_positional_list(
        "algorithm_list", "algorithms to run", converter=algorithm, values=algorithms
    )
    parser.add_option("-r", "--ratio", "mixing ratio", field_name="RATIO", kind="double")
    parser.add_switch("-v", "--verbose", "print every step")

    result = parser.parse_args()
    if not result:
        parser.print_usage()
        return 1
    if result.help_requested:
        parser.print_usage()
        return 0

    for name in algorithms:
        print(f"{result['input_file']}: running {name} (ratio={result['ratio']})")
    algorithms.release()
    return 0


if __name__ == "__main__":
    sys.exit(main())
