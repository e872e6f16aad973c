"""Non-negative integers of any length stored as decimal digits."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from functools import total_ordering

_BASE = 10
_DIGITS = "0123456789"


@total_ordering
class BigNumber:
    """A non-negative decimal integer of unbounded length."""

    __slots__ = ("_digits",)

    def __init__(self, text: str = "0") -> None:
        if not text or any(c not in _DIGITS for c in text):
            raise ValueError(f"not a non-negative decimal number: {text!r}")
        self._digits = _trimmed([int(c) for c in reversed(text)])

    @classmethod
    def _from_digits(cls, digits: list[int]) -> BigNumber:
        number = cls.__new__(cls)
        number._digits = _trimmed(digits)
        return number

    def __add__(self, other: BigNumber) -> BigNumber:
        if not isinstance(other, BigNumber):
            return NotImplemented
        a, b = self._digits, other._digits
        result = []
        carry = 0
        for i in range(max(len(a), len(b))):
            total = carry + (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0)
            carry, digit = divmod(total, _BASE)
            result.append(digit)
        if carry:
            result.append(carry)
        return self._from_digits(result)

    def __sub__(self, other: BigNumber) -> BigNumber:
        """Return the difference; raise ValueError when it would be negative."""
        if not isinstance(other, BigNumber):
            return NotImplemented
        if self < other:
            raise ValueError("difference would be negative")
        b = other._digits
        result = []
        borrow = 0
        for i, digit in enumerate(self._digits):
            diff = digit - borrow - (b[i] if i < len(b) else 0)
            borrow = 1 if diff < 0 else 0
            result.append(diff + _BASE * borrow)
        return self._from_digits(result)

    def __mul__(self, other: BigNumber) -> BigNumber:
        if not isinstance(other, BigNumber):
            return NotImplemented
        a, b = self._digits, other._digits
        result = [0] * (len(a) + len(b))
        for i, x in enumerate(a):
            carry = 0
            for j, y in enumerate(b):
                carry, result[i + j] = divmod(result[i + j] + x * y + carry, _BASE)
            result[i + len(b)] += carry
        return self._from_digits(result)

    def __lt__(self, other: BigNumber) -> bool:
        if not isinstance(other, BigNumber):
            return NotImplemented
        a, b = self._digits, other._digits
        return (len(a), a[::-1]) < (len(b), b[::-1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigNumber):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self) -> int:
        return hash(tuple(self._digits))

    def __str__(self) -> str:
        return "".join(map(str, reversed(self._digits))) or "0"

    def __repr__(self) -> str:
        return f"BigNumber({str(self)!r})"


def _trimmed(digits: list[int]) -> list[int]:
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``number number operator`` triples from stdin and print each result."""
    tokens = iter(sys.stdin.read().split())
    for first, second, action in zip(tokens, tokens, tokens):
        num1, num2 = BigNumber(first), BigNumber(second)
        if action == "+":
            print(num1 + num2)
        elif action == "-":
            print("error" if num1 < num2 else num1 - num2)
        elif action == "*":
            print(num1 * num2)
        elif action == "<":
            print("true" if num1 < num2 else "false")
        elif action == "=":
            print("true" if num1 == num2 else "false")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())