# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import enum

import msgspec


class KeyCategory(enum.Enum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    CLEAR = enum.auto()
    ENTER = enum.auto()


class KeyIdentity(enum.IntEnum):
    # digits keep their face value
    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    POINT = 10
    PLUS_MINUS = 11
    PERCENT = 12
    ADD = 13
    SUBTRACT = 14
    MULTIPLY = 15
    DIVIDE = 16
    CLEAR = 17
    ENTER = 18

    @enum.property
    def is_digit(self):
        return self <= KeyIdentity.NINE

    @enum.property
    def category(self):
        match self:
            case KeyIdentity.ADD | KeyIdentity.SUBTRACT | KeyIdentity.MULTIPLY | KeyIdentity.DIVIDE:
                return KeyCategory.OPERATOR
            case KeyIdentity.CLEAR:
                return KeyCategory.CLEAR
            case KeyIdentity.ENTER:
                return KeyCategory.ENTER
            case _:
                return KeyCategory.NUMBER


class KeyEvent(msgspec.Struct, frozen=True):
    # category is redundant with identity, but the editor filters on it first
    category: KeyCategory
    identity: KeyIdentity

    @classmethod
    def of(cls, identity: KeyIdentity):
        return cls(category=identity.category, identity=identity)


class KeypadButton(msgspec.Struct, frozen=True):
    identity: KeyIdentity
    label: str


# Row-major, as laid out on the physical keypad. The clear button's label is
# not fixed; see editor.clear_label.
KEYPAD: tuple[tuple[KeypadButton, ...], ...] = (
    (
        KeypadButton(KeyIdentity.CLEAR, "AC"),
        KeypadButton(KeyIdentity.PLUS_MINUS, "±"),
        KeypadButton(KeyIdentity.PERCENT, "%"),
        KeypadButton(KeyIdentity.DIVIDE, "÷"),
    ),
    (
        KeypadButton(KeyIdentity.SEVEN, "7"),
        KeypadButton(KeyIdentity.EIGHT, "8"),
        KeypadButton(KeyIdentity.NINE, "9"),
        KeypadButton(KeyIdentity.MULTIPLY, "×"),
    ),
    (
        KeypadButton(KeyIdentity.FOUR, "4"),
        KeypadButton(KeyIdentity.FIVE, "5"),
        KeypadButton(KeyIdentity.SIX, "6"),
        KeypadButton(KeyIdentity.SUBTRACT, "-"),
    ),
    (
        KeypadButton(KeyIdentity.ONE, "1"),
        KeypadButton(KeyIdentity.TWO, "2"),
        KeypadButton(KeyIdentity.THREE, "3"),
        KeypadButton(KeyIdentity.ADD, "+"),
    ),
    (
        KeypadButton(KeyIdentity.ZERO, "0"),
        KeypadButton(KeyIdentity.POINT, "."),
        KeypadButton(KeyIdentity.ENTER, "="),
    ),
)
