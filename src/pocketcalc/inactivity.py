# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import datetime
import logging
import math
import typing

import trio

logger = logging.getLogger(__name__)

S = typing.TypeVar("S")


class InactivityTimer(typing.Generic[S]):
    """A deadline that is pushed back by every key event.

    If the deadline passes before the next key event arrives, the owner applies `fire` to its state, which disarms the timer
    and returns the reset state. The timer stays disarmed until the next key event re-arms it, so an idle calculator
    resets exactly once.
    """

    deadline: float

    def __init__(self, name: str, delay: datetime.timedelta, reset: typing.Callable[[S], S]):
        self.name = name
        self.delay = delay
        self.reset = reset
        self.deadline = math.inf

    @property
    def armed(self):
        return self.deadline != math.inf

    def arm(self):
        self.deadline = trio.current_time() + self.delay.total_seconds()

    def disarm(self):
        self.deadline = math.inf

    def expired(self) -> bool:
        return trio.current_time() >= self.deadline

    def fire(self, state: S) -> S:
        self.disarm()
        logger.debug("%s idle for %s, resetting", self.name, self.delay)
        return self.reset(state)


def earliest_deadline(*timers: InactivityTimer) -> float:
    return min((timer.deadline for timer in timers), default=math.inf)
