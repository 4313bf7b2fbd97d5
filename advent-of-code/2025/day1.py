"""
Safe dial solver.

The dial has positions 0-99 and starts at 50. Each input line rotates it
left (``L``) or right (``R``) by some number of clicks, e.g. ``L68`` or ``R48``.

    Part 1: how many rotations leave the dial pointing at 0.
    Part 2: how many clicks land on 0, including passes in the middle of a rotation.

Run:
    python day1.py [input.txt] [--verbose]
"""

import argparse
import re
import sys
from typing import Iterable, Iterator, Optional, Tuple

DIAL_SIZE = 100  # Numbers 0-99
START_POSITION = 50
DEFAULT_INPUT = "input.txt"

LEFT = "L"
RIGHT = "R"

INSTRUCTION_RE = re.compile(r"^([LR])([0-9]+)$")

EXIT_OK = 0
EXIT_INPUT_UNAVAILABLE = 1
EXIT_BAD_INSTRUCTION = 2


class DialError(Exception):
    """Base class for errors raised by the dial solver."""


class InputUnavailableError(DialError):
    """The puzzle input could not be opened or read."""

    def __init__(self, filename: str, reason: str):
        super().__init__(f"Could not open file {filename}: {reason}")
        self.filename = filename


class InstructionError(DialError, ValueError):
    """A line is not of the form ``L<digits>`` or ``R<digits>``."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}invalid rotation {line!r}")
        self.line = line
        self.line_number = line_number


class Instruction:
    """
    A single rotation.

    Attributes:
        direction (str): ``"L"`` (towards lower numbers) or ``"R"``.
        distance (int): Number of clicks, never negative.
    """
    __slots__ = ("direction", "distance")

    def __init__(self, direction: str, distance: int):
        self.direction = direction
        self.distance = distance

    def __eq__(self, other):
        if not isinstance(other, Instruction):
            return NotImplemented
        return (self.direction, self.distance) == (other.direction, other.distance)

    def __repr__(self):
        return f"Instruction({self.direction!r}, {self.distance})"

    def __str__(self):
        return f"{self.direction}{self.distance}"


# -------------------------------------------------------------
# Parsing
# -------------------------------------------------------------

def parse_instruction(line: str, line_number: Optional[int] = None) -> Instruction:
    """
    Parse one rotation such as ``L68``.

    Args:
        line (str): The raw input line. Surrounding whitespace is ignored.
        line_number (int, optional): 1-based position in the input, used in errors.

    Returns:
        Instruction: The parsed rotation.

    Raises:
        InstructionError: If the line is not ``[LR]`` followed by digits.
    """
    text = line.strip()
    match = INSTRUCTION_RE.match(text)
    if match is None:
        raise InstructionError(text, line_number)
    try:
        distance = int(match.group(2))
    except ValueError as exc:
        # more digits than int() will convert
        raise InstructionError(text, line_number) from exc
    return Instruction(match.group(1), distance)


def parse_instructions(lines: Iterable[str]) -> Iterator[Instruction]:
    """Yield an Instruction for every non-blank line."""
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield parse_instruction(line, number)


# -------------------------------------------------------------
# Dial arithmetic
# -------------------------------------------------------------

def count_zero_crossings(position: int, direction: str, distance: int,
                         size: int = DIAL_SIZE) -> int:
    """
    Count how many of the clicks 1..distance leave the dial on 0.

    Going left we reach 0 after ``position`` clicks, going right after
    ``size - position``; from 0 itself it takes a full turn either way.
    After that first hit there is one more every ``size`` clicks.
    """
    if direction == LEFT:
        first = size if position == 0 else position
    elif direction == RIGHT:
        first = size if position == 0 else size - position
    else:
        raise ValueError(f"unknown direction {direction!r}")

    if first > distance:
        return 0
    return 1 + (distance - first) // size


def rotate(position: int, direction: str, distance: int, size: int = DIAL_SIZE) -> int:
    """Return the dial position after turning ``distance`` clicks."""
    # Python's % is already non-negative for a positive size
    if direction == LEFT:
        return (position - distance) % size
    if direction == RIGHT:
        return (position + distance) % size
    raise ValueError(f"unknown direction {direction!r}")


class DialSimulator:
    """
    Tracks the dial position and both zero counters.

    Attributes:
        position (int): Where the dial points now, in ``[0, size)``.
        landed_on_zero (int): Rotations that ended on 0 (part 1).
        crossed_zero (int): Clicks that landed on 0 (part 2).
    """

    def __init__(self, start: int = START_POSITION, size: int = DIAL_SIZE):
        if size < 1:
            raise ValueError(f"dial size must be positive, got {size}")
        if not 0 <= start < size:
            raise ValueError(f"start position {start} is not on a dial of size {size}")
        self.size = size
        self.position = start
        self.landed_on_zero = 0
        self.crossed_zero = 0

    @property
    def counts(self) -> Tuple[int, int]:
        return self.landed_on_zero, self.crossed_zero

    def apply(self, instruction: Instruction) -> int:
        """
        Turn the dial once and update the counters.

        Returns:
            int: How many times this rotation touched 0.
        """
        crossings = count_zero_crossings(
            self.position, instruction.direction, instruction.distance, self.size
        )
        self.crossed_zero += crossings

        self.position = rotate(
            self.position, instruction.direction, instruction.distance, self.size
        )
        if self.position == 0:
            self.landed_on_zero += 1

        return crossings

    def run(self, instructions: Iterable[Instruction], verbose: bool = False) -> Tuple[int, int]:
        if verbose:
            log(f"Starting position: {self.position}")

        for instruction in instructions:
            crossings = self.apply(instruction)
            if verbose:
                log(f"After {instruction}: position = {self.position}, "
                    f"crossed zero {crossings} time(s)")

        if verbose:
            log(f"Landed on 0: {self.landed_on_zero}, crossed 0: {self.crossed_zero}")
        return self.counts


# -------------------------------------------------------------
# Entry points
# -------------------------------------------------------------

def log(message: str) -> None:
    # stdout is reserved for the two answer lines
    print(f"[INFO] {message}", file=sys.stderr)


def solve_safe_dial(input_text: str, verbose: bool = False) -> Tuple[int, int]:
    """
    Solve both parts for the given puzzle text.

    Returns:
        tuple[int, int]: (part 1 answer, part 2 answer).
    """
    simulator = DialSimulator()
    return simulator.run(parse_instructions(input_text.split("\n")), verbose=verbose)


def solve_from_file(filename: str, verbose: bool = False) -> Tuple[int, int]:
    """Read puzzle input from a file and solve."""
    try:
        with open(filename, "r", encoding="utf-8") as f:
            input_text = f.read()
    except OSError as exc:
        raise InputUnavailableError(filename, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise InputUnavailableError(filename, f"not valid UTF-8 ({exc.reason})") from exc
    return solve_safe_dial(input_text, verbose=verbose)


def format_report(part1: int, part2: int) -> str:
    return (
        f"Part 1 - The actual password is: {part1}\n"
        f"Part 2 - The actual password is: {part2}"
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Count how often the safe dial points at 0")
    parser.add_argument(
        "input_file",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"File with one rotation per line (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Trace every rotation on stderr",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        part1, part2 = solve_from_file(args.input_file, verbose=args.verbose)
    except InputUnavailableError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INPUT_UNAVAILABLE
    except InstructionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_BAD_INSTRUCTION

    print(format_report(part1, part2))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
