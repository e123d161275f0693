"""Stateless arithmetic used by the calculator endpoints."""
from __future__ import annotations

import math
from enum import Enum

# Upper bound on the loop in ``Calculator.power``.
MAX_EXPONENT = 10_000


class CalculatorError(ValueError):
    pass


class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise CalculatorError("result is not a finite number")
    return value


class Calculator:
    """Every result is a finite float; anything else raises ``CalculatorError``."""

    def calculate(self, op: Operation | str, a: float, b: float) -> float:
        try:
            op = Operation(op)
        except ValueError:
            raise CalculatorError(f"unsupported operation: {op}") from None
        if op is Operation.ADD:
            return self.add(a, b)
        if op is Operation.SUBTRACT:
            return self.subtract(a, b)
        if op is Operation.MULTIPLY:
            return self.multiply(a, b)
        return self.divide(a, b)

    def add(self, a: float, b: float) -> float:
        return _finite(a + b)

    def subtract(self, a: float, b: float) -> float:
        return _finite(a - b)

    def multiply(self, a: float, b: float) -> float:
        return _finite(a * b)

    def divide(self, a: float, b: float) -> float:
        if b == 0:
            raise CalculatorError("division by zero")
        return _finite(a / b)

    def power(self, base: float, exponent: float) -> float:
        """Repeated multiplication; the fractional part of ``exponent`` is dropped."""
        if not math.isfinite(exponent):
            raise CalculatorError(f"invalid number: {exponent}")
        if exponent < 0:
            raise CalculatorError("negative exponents not supported")
        if exponent > MAX_EXPONENT:
            raise CalculatorError("exponent too large")
        result = 1.0
        for _ in range(int(exponent)):
            result = _finite(result * base)
        return _finite(result)


def parse_number(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise CalculatorError(f"invalid number: {raw}") from None
    if not math.isfinite(value):
        raise CalculatorError(f"invalid number: {raw}")
    return value
