# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import decimal
import enum
import typing

import msgspec

from . import decimals
from .commontypes import InternalConsistencyError
from .keys import KeyCategory, KeyEvent, KeyIdentity


class InputMode(enum.Enum):
    # how the next digit key is interpreted
    DECIMAL = enum.auto()
    PERCENT = enum.auto()
    POINT = enum.auto()


class OperandEditState(msgspec.Struct, frozen=True):
    input_mode: InputMode = InputMode.DECIMAL
    value: str = "0"
    # whether this transition should be published downstream
    visible: bool = True


def reset(state: OperandEditState) -> OperandEditState:
    return OperandEditState(input_mode=InputMode.DECIMAL, value="0", visible=False)


def clear(state: OperandEditState) -> OperandEditState:
    return OperandEditState(input_mode=InputMode.DECIMAL, value="0", visible=True)


def percent(state: OperandEditState, context: decimal.Context = decimals.DEFAULT_CONTEXT) -> OperandEditState:
    return OperandEditState(input_mode=InputMode.PERCENT, value=decimals.percent(state.value, context), visible=True)


def point(state: OperandEditState) -> OperandEditState:
    match state.input_mode:
        case InputMode.DECIMAL:
            value = state.value + "."
        case InputMode.PERCENT:
            value = "0."
        case InputMode.POINT:
            value = state.value
    return OperandEditState(input_mode=InputMode.POINT, value=value, visible=True)


def toggle_sign(state: OperandEditState) -> OperandEditState:
    value = state.value[1:] if state.value.startswith("-") else "-" + state.value
    return msgspec.structs.replace(state, value=value, visible=True)


def _append_digit(state: OperandEditState, face: int) -> OperandEditState:
    return msgspec.structs.replace(state, value=state.value + str(face), visible=True)


def digit(state: OperandEditState, face: int) -> OperandEditState:
    match state.input_mode:
        case InputMode.DECIMAL:
            if decimals.is_zero(state.value):
                # drop the placeholder zero but keep a sign typed ahead of the digits
                state = msgspec.structs.replace(state, value=state.value[:-1])
            return _append_digit(state, face)
        case InputMode.POINT:
            return _append_digit(state, face)
        case InputMode.PERCENT:
            return OperandEditState(input_mode=InputMode.DECIMAL, value=str(face), visible=True)


def apply_key(
    state: OperandEditState, event: KeyEvent, context: decimal.Context = decimals.DEFAULT_CONTEXT
) -> OperandEditState:
    if event.category is KeyCategory.OPERATOR or event.category is KeyCategory.ENTER:
        # the sequencer registers the boundary; the editor must not redisplay "0"
        return reset(state)
    if event.category is KeyCategory.CLEAR:
        return clear(state)
    match event.identity:
        case KeyIdentity.PERCENT:
            return percent(state, context)
        case KeyIdentity.POINT:
            return point(state)
        case KeyIdentity.PLUS_MINUS:
            return toggle_sign(state)
        case identity if identity.is_digit:
            return digit(state, int(identity))
    raise InternalConsistencyError(f"Unexpected number key {event.identity!r}")


def visible_value(state: OperandEditState) -> typing.Optional[str]:
    return state.value if state.visible else None


def clear_label(state: OperandEditState) -> str:
    return "AC" if decimals.is_zero(state.value) else "C"
