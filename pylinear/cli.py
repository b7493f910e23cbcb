"""
PyLinear interactive console.

Usage:
    python -m pylinear [--dtype {int,float}]
    pylinear [--dtype {int,float}]

Menus:
    Main       1 Matrix Operations, 2 Vector Operations, 3 Exit
    Matrix     enter two matrices, then 1-9 operations, 10 back
    Vector     enter two vectors, then 1-3 operations, 4 back

Operations go through linalg.solvers.evaluate(), so a failed operation is
reported on stderr and the menu carries on with the data already entered.
End of input exits cleanly.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, TextIO

from pylinear import __version__
from pylinear.core import scalar
from pylinear.core.exceptions import ValidationError
from pylinear.core.outcome import Failure
from pylinear.core.scalar import ScalarKind
from pylinear.linalg.matrix import Matrix
from pylinear.linalg.solvers import evaluate
from pylinear.linalg.vector import Vector


MAIN_MENU = (
    "Menu:",
    "1. Matrix Operations",
    "2. Vector Operations",
    "3. Exit",
)

MATRIX_MENU = (
    "Matrix Operation Menu:",
    "1. Matrix Addition",
    "2. Matrix Subtraction",
    "3. Scalar Multiplication",
    "4. Matrix Multiplication",
    "5. Transpose",
    "6. Norm",
    "7. Inverse",
    "8. Eigenvalues",
    "9. Determinant",
    "10. Exit to main menu",
)

VECTOR_MENU = (
    "Vector Operation Menu:",
    "1. Vector Addition",
    "2. Vector Subtraction",
    "3. Vector Inner Product",
    "4. Exit to main menu",
)

# Matrix menu entries that produce a container from matrix 1 (and matrix 2)
_MATRIX_CONTAINER_OPS = {
    1: ('add', "Matrix Addition Result:"),
    2: ('subtract', "Matrix Subtraction Result:"),
    4: ('multiply', "Matrix Multiplication Result:"),
    5: ('transpose', "Transpose Result:"),
    7: ('inverse', "Inverse of Matrix 1:"),
}

# Matrix menu entries reported separately for each matrix
_MATRIX_PER_OPERAND_OPS = {
    6: ('norm', "Norm"),
    8: ('eigenvalues', "Eigenvalues"),
    9: ('determinant', "Determinant"),
}

_VECTOR_OPS = {
    1: ('add', "Vector Addition Result:"),
    2: ('subtract', "Vector Subtraction Result:"),
    3: ('inner_product', "Vector Inner Product Result:"),
}


class EndOfInput(Exception):
    """Input stream closed while the console was waiting for a value."""
    pass


class Console:
    """
    Menu-driven front end over the linalg dispatch layer.

    Streams are injectable so the whole session can be driven from a
    string in tests.
    """

    def __init__(
        self,
        dtype: ScalarKind = 'int',
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.dtype = dtype
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._element_dtype = scalar.resolve_dtype(dtype)
        self._parse_number: Callable[[str], int | float] = int if dtype == 'int' else float

    # --- I/O helpers ---

    def _say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _complain(self, text: str) -> None:
        print(text, file=self.stderr)

    def _read(self, prompt: str, parse: Callable[[str], int | float]) -> int | float:
        """Prompt until a line parses; raise EndOfInput when input runs out."""
        while True:
            self.stdout.write(prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                raise EndOfInput()
            try:
                return parse(line.strip())
            except ValueError:
                self._complain(f"Invalid input {line.strip()!r}. Please enter a number.")
            except ValidationError as e:
                self._complain(f"Invalid input {line.strip()!r}: {e}")

    def _read_int(self, prompt: str) -> int:
        return int(self._read(prompt, int))

    def _parse_element(self, text: str) -> Any:
        """Parse one matrix or vector element, or a scalar factor."""
        return scalar.coerce(self._parse_number(text), self._element_dtype, "value")

    def _read_size(self, prompt: str) -> int:
        while True:
            size = self._read_int(prompt)
            if size >= 0:
                return size
            self._complain(f"Invalid size {size}. Please enter a non-negative number.")

    def _choose(self, menu: tuple[str, ...]) -> int:
        for line in menu:
            self._say(line)
        return self._read_int("Enter your choice: ")

    def _invalid_choice(self, highest: int) -> None:
        self._say(f"Invalid choice. Please enter a number between 1 and {highest}.")

    def _report(self, outcome, heading: str) -> None:
        """Print a successful result under heading, or the failure message."""
        if isinstance(outcome, Failure):
            self._complain(outcome.message)
            return
        for warning in outcome.result.warnings:
            self._complain(f"warning: {warning}")
        value = outcome.value
        if isinstance(value, (Vector, Matrix)):
            self._say(heading)
            self._say(str(value))
        elif isinstance(value, list):
            self._say(f"{heading} " + " ".join(str(v) for v in value))
        else:
            self._say(f"{heading} {value}")

    # --- Data entry ---

    def _read_matrix(self, label: str) -> Matrix:
        rows = self._read_size(f"Enter the number of rows for {label}: ")
        cols = self._read_size(f"Enter the number of columns for {label}: ")
        matrix = Matrix(rows, cols, dtype=self.dtype)
        self._say(f"Enter elements for {label}:")
        for i in range(rows):
            for j in range(cols):
                value = self._read(
                    f"Enter element at position ({i}, {j}): ", self._parse_element
                )
                matrix.set(i, j, value)
        self._say(f"{label.capitalize()}:")
        self._say(str(matrix))
        return matrix

    def _read_vector(self, label: str) -> Vector:
        size = self._read_size(f"Enter the size of {label}: ")
        vector = Vector(size, dtype=self.dtype)
        self._say(f"Enter elements for {label}:")
        for i in range(size):
            value = self._read(f"Enter element at position {i}: ", self._parse_element)
            vector.set(i, value)
        self._say(f"{label.capitalize()}:")
        self._say(str(vector))
        return vector

    # --- Menus ---

    def matrix_session(self) -> None:
        first = self._read_matrix("matrix 1")
        second = self._read_matrix("matrix 2")

        while True:
            choice = self._choose(MATRIX_MENU)
            if choice == 10:
                return
            if choice in _MATRIX_CONTAINER_OPS:
                operation, heading = _MATRIX_CONTAINER_OPS[choice]
                right = second if operation in ('add', 'subtract', 'multiply') else None
                self._report(evaluate(operation, first, right), heading)
            elif choice == 3:
                factor = self._read("Enter the scalar value: ", self._parse_element)
                self._report(
                    evaluate('scalar_multiply', first, scalar=factor),
                    "Scalar Multiplication Result:",
                )
            elif choice in _MATRIX_PER_OPERAND_OPS:
                operation, name = _MATRIX_PER_OPERAND_OPS[choice]
                for number, matrix in ((1, first), (2, second)):
                    self._report(evaluate(operation, matrix), f"{name} of Matrix {number}:")
            else:
                self._invalid_choice(10)

    def vector_session(self) -> None:
        first = self._read_vector("vector 1")
        second = self._read_vector("vector 2")

        while True:
            choice = self._choose(VECTOR_MENU)
            if choice == 4:
                return
            if choice in _VECTOR_OPS:
                operation, heading = _VECTOR_OPS[choice]
                outcome = evaluate(operation, first, second)
                if operation == 'inner_product' and not isinstance(outcome, Failure):
                    self._say(heading)
                    self._say(str(outcome.value))
                else:
                    self._report(outcome, heading)
            else:
                self._invalid_choice(4)

    def run(self) -> int:
        """Main menu loop. Returns the process exit status."""
        try:
            while True:
                choice = self._choose(MAIN_MENU)
                if choice == 1:
                    self.matrix_session()
                elif choice == 2:
                    self.vector_session()
                elif choice == 3:
                    self._say("Exiting program.")
                    return 0
                else:
                    self._invalid_choice(3)
        except EndOfInput:
            self._say()
            return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pylinear",
        description="Interactive vector and matrix operations.",
    )
    parser.add_argument(
        "--dtype",
        choices=("int", "float"),
        default="int",
        help="scalar type for entered values (default: int, truncating division)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return Console(dtype=args.dtype).run()


if __name__ == "__main__":
    sys.exit(main())
