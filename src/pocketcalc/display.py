# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

import msgspec

from .keys import KEYPAD, KeyIdentity
from .sequencer import CalculatorSnapshot

OPERATOR_GLYPHS = {
    KeyIdentity.ADD: "+",
    KeyIdentity.SUBTRACT: "-",
    KeyIdentity.MULTIPLY: "×",
    KeyIdentity.DIVIDE: "÷",
}

ERROR_TEXT = "Error"


def group_digits(value: str) -> str:
    "Group the integer part of a decimal string in thousands; the sign, fraction and any trailing point are kept as typed."
    sign = ""
    if value.startswith("-"):
        sign = "-"
        value = value[1:]
    integer, point, fraction = value.partition(".")
    head = len(integer) % 3 or 3
    groups = [integer[:head]] + [integer[start : start + 3] for start in range(head, len(integer), 3)]
    return sign + ",".join(groups) + point + fraction


class DisplayState(msgspec.Struct, frozen=True):
    active_first: bool
    first: str
    second: str
    operator_glyph: str
    clear_label: str
    error: bool = False


def project(snapshot: CalculatorSnapshot, clear_label: str) -> DisplayState:
    return DisplayState(
        active_first=snapshot.step.is_first,
        first=group_digits(snapshot.first),
        second=group_digits(snapshot.second),
        operator_glyph=OPERATOR_GLYPHS[snapshot.operator],
        clear_label=clear_label,
        error=snapshot.error,
    )


class TerminalDisplay:
    """Renders display states as single lines of text, with the active register in brackets."""

    def __init__(self, write: typing.Callable[[str], typing.Any]):
        self.write = write

    def format(self, state: DisplayState) -> str:
        first, second = state.first, state.second
        if state.error:
            if state.active_first:
                first = ERROR_TEXT
            else:
                second = ERROR_TEXT
        if state.active_first:
            first = f"[{first}]"
        else:
            second = f"[{second}]"
        return f"{first} {state.operator_glyph} {second}  ({state.clear_label})"

    def show(self, state: DisplayState):
        self.write(self.format(state) + "\n")

    def show_keypad(self, clear_label: str):
        rows = []
        for row in KEYPAD:
            labels = [clear_label if button.identity is KeyIdentity.CLEAR else button.label for button in row]
            rows.append(" ".join(f"{label:>2}" for label in labels))
        self.write("\n".join(rows) + "\n")
