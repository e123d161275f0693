"""Calculator blueprint: arithmetic over two numeric path parameters."""
from __future__ import annotations

from flask import Blueprint

from ...errors import ok
from ...services.calculator import Calculator, Operation, parse_number


bp = Blueprint("calculator", __name__)
calc = Calculator()


def _result(value: float):
    return ok({"result": value})


@bp.get("/<any(add, subtract, multiply, divide):op>/<a>/<b>")
def calculate(op: str, a: str, b: str):
    return _result(calc.calculate(Operation(op), parse_number(a), parse_number(b)))


@bp.get("/power/<a>/<b>")
def power(a: str, b: str):
    return _result(calc.power(parse_number(a), parse_number(b)))
