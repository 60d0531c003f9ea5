"""Checking that the parentheses of an expression are balanced."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from edakit.linked_list import Stack


@dataclass(frozen=True)
class ParenthesisCheck:
    """Outcome of a check: whether it is valid and the position where it stopped."""

    valid: bool
    position: int


def validate_parenthesis(text: str) -> ParenthesisCheck:
    """Check the parentheses of ``text``.

    The position is the index of an unmatched ``)``, otherwise the last index.
    """
    stack = Stack()
    error = False
    index = 0
    while not error and index < len(text):
        symbol = text[index]
        if symbol == "(":
            stack.push(symbol)
        elif symbol == ")":
            if stack.is_empty():
                error = True
            else:
                stack.pop()
        index += 1
    if not stack.is_empty():
        error = True
    return ParenthesisCheck(valid=not error, position=index - 1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    text = args[0] if args else input("Ingresa expresión: ")
    result = validate_parenthesis(text)
    if result.valid:
        print(" Expresión Correcta ")
    else:
        print(" Expresión Inválida")
        print(f"Pos error:  {result.position}")
    return 0


if __name__ == "__main__":
    sys.exit(main())