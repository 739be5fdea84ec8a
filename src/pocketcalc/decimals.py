# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Exact arithmetic on canonical decimal strings.

Every value that crosses a module boundary in pocketcalc is a string; this module is the only place those strings become numbers.
A canonical string is fixed-point, with no exponent and no trailing fractional zeros ("0.5", "-12", "1234.125"). Negative zero
survives as "-0", since the sign key can produce it and the clear key has to recognise it.
"""

import decimal
import logging

from .commontypes import ArithmeticOverflow, DivisionByZero, InternalConsistencyError

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 20

ONE_HUNDRED = decimal.Decimal(100)


def make_context(precision: int = DEFAULT_PRECISION) -> decimal.Context:
    return decimal.Context(
        prec=precision,
        rounding=decimal.ROUND_HALF_UP,
        traps=[decimal.DivisionByZero, decimal.InvalidOperation, decimal.Overflow],
    )


DEFAULT_CONTEXT = make_context()


def parse(value: str) -> decimal.Decimal:
    try:
        parsed = decimal.Decimal(value)
    except decimal.InvalidOperation as exc:
        logger.error("Malformed decimal string %r", value)
        raise InternalConsistencyError(f"Malformed decimal string {value!r}") from exc
    if not parsed.is_finite():
        logger.error("Non-finite decimal string %r", value)
        raise InternalConsistencyError(f"Non-finite decimal string {value!r}")
    return parsed


def canonical(value: decimal.Decimal) -> str:
    if value.is_zero():
        return "-0" if value.is_signed() else "0"
    return format(value.normalize(decimal.Context(prec=max(len(value.as_tuple().digits), 1))), "f")


def _apply(operation, first: str, second: str) -> str:
    try:
        result = operation(parse(first), parse(second))
    except decimal.Overflow as exc:
        raise ArithmeticOverflow(first, second) from exc
    return canonical(result)


def add(first: str, second: str, context: decimal.Context = DEFAULT_CONTEXT) -> str:
    return _apply(context.add, first, second)


def subtract(first: str, second: str, context: decimal.Context = DEFAULT_CONTEXT) -> str:
    return _apply(context.subtract, first, second)


def multiply(first: str, second: str, context: decimal.Context = DEFAULT_CONTEXT) -> str:
    return _apply(context.multiply, first, second)


def divide(first: str, second: str, context: decimal.Context = DEFAULT_CONTEXT) -> str:
    # 0/0 is InvalidOperation rather than DivisionByZero in the decimal module
    if parse(second).is_zero():
        raise DivisionByZero(first)
    return _apply(context.divide, first, second)


def percent(value: str, context: decimal.Context = DEFAULT_CONTEXT) -> str:
    return canonical(context.divide(parse(value), ONE_HUNDRED))


def is_zero(value: str) -> bool:
    """True for the two spellings of zero the editor can leave in a register."""
    return value == "0" or value == "-0"
