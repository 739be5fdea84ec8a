# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later


class CalculatorError(Exception):
    pass


class DivisionByZero(CalculatorError):
    def __init__(self, dividend: str):
        self.dividend = dividend
        super().__init__(f"Cannot divide {dividend} by zero")


class InternalConsistencyError(CalculatorError):
    pass


class ArithmeticOverflow(CalculatorError):
    def __init__(self, first: str, second: str):
        self.first = first
        self.second = second
        super().__init__(f"Result of {first} and {second} is too large")
