# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import decimal
import enum
import logging

import msgspec

from . import decimals
from .commontypes import ArithmeticOverflow, DivisionByZero, InternalConsistencyError
from .keys import KeyCategory, KeyEvent, KeyIdentity

logger = logging.getLogger(__name__)

#                      N            +         =
#  WAIT_FIRST     CHANGE_FIRST  WAIT_SECOND  WAIT_FIRST
#  CHANGE_FIRST        -        WAIT_SECOND  WAIT_FIRST
#  WAIT_SECOND    CHANGE_SECOND      -       WAIT_FIRST
#  CHANGE_SECOND       -        WAIT_SECOND  WAIT_FIRST


class Step(enum.Enum):
    WAIT_FIRST = enum.auto()
    CHANGE_FIRST = enum.auto()
    WAIT_SECOND = enum.auto()
    CHANGE_SECOND = enum.auto()

    @enum.property
    def is_first(self):
        return self is Step.WAIT_FIRST or self is Step.CHANGE_FIRST


class CalculatorSnapshot(msgspec.Struct, frozen=True):
    step: Step = Step.WAIT_FIRST
    first: str = "0"
    second: str = "0"
    operator: KeyIdentity = KeyIdentity.ADD
    # discard the next operand edit; set by a full clear
    skip_operand: bool = False
    # the last calculation divided by zero or overflowed
    error: bool = False

    @property
    def active(self) -> str:
        return self.first if self.step.is_first else self.second


OPERATIONS = {
    KeyIdentity.ADD: decimals.add,
    KeyIdentity.SUBTRACT: decimals.subtract,
    KeyIdentity.MULTIPLY: decimals.multiply,
    KeyIdentity.DIVIDE: decimals.divide,
}


def operate(first: str, second: str, operator: KeyIdentity, context: decimal.Context = decimals.DEFAULT_CONTEXT) -> str:
    try:
        operation = OPERATIONS[operator]
    except KeyError:
        logger.error("Unexpected operator %r", operator)
        raise InternalConsistencyError(f"Unexpected operator {operator!r}") from None
    return operation(first, second, context)


def reset(snapshot: CalculatorSnapshot) -> CalculatorSnapshot:
    return CalculatorSnapshot()


def apply_operand(snapshot: CalculatorSnapshot, value: str) -> CalculatorSnapshot:
    if snapshot.skip_operand:
        return msgspec.structs.replace(snapshot, skip_operand=False, error=False)
    if snapshot.step.is_first:
        return msgspec.structs.replace(snapshot, step=Step.CHANGE_FIRST, first=value, error=False)
    return msgspec.structs.replace(snapshot, step=Step.CHANGE_SECOND, second=value, error=False)


def _calculate(first: str, second: str, operator: KeyIdentity, context: decimal.Context):
    try:
        return operate(first, second, operator, context)
    except (DivisionByZero, ArithmeticOverflow) as exc:
        logger.warning("%s; showing error", exc)
        return None


def operator(snapshot: CalculatorSnapshot, pressed: KeyIdentity, context: decimal.Context = decimals.DEFAULT_CONTEXT):
    first = snapshot.first
    if snapshot.step is Step.CHANGE_SECOND:
        # chained operation: the pressed operator is both applied and made pending
        first = _calculate(snapshot.first, snapshot.second, pressed, context)
        if first is None:
            return CalculatorSnapshot(error=True)
    return msgspec.structs.replace(snapshot, step=Step.WAIT_SECOND, first=first, operator=pressed, error=False)


def enter(snapshot: CalculatorSnapshot, context: decimal.Context = decimals.DEFAULT_CONTEXT):
    second = snapshot.first if snapshot.step is Step.WAIT_SECOND else snapshot.second
    first = _calculate(snapshot.first, second, snapshot.operator, context)
    if first is None:
        return CalculatorSnapshot(error=True)
    return msgspec.structs.replace(snapshot, step=Step.WAIT_FIRST, first=first, second=second, error=False)


def clear(snapshot: CalculatorSnapshot) -> CalculatorSnapshot:
    if decimals.is_zero(snapshot.active):
        return CalculatorSnapshot(skip_operand=True)
    # the editor's clear overwrites the active register instead
    return snapshot


def apply_key(
    snapshot: CalculatorSnapshot, event: KeyEvent, context: decimal.Context = decimals.DEFAULT_CONTEXT
) -> CalculatorSnapshot:
    match event.category:
        case KeyCategory.OPERATOR:
            return operator(snapshot, event.identity, context)
        case KeyCategory.ENTER:
            return enter(snapshot, context)
        case KeyCategory.CLEAR:
            return clear(snapshot)
        case KeyCategory.NUMBER:
            # number keys only reach the sequencer as operand edits
            return snapshot
