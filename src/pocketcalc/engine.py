# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
from contextlib import aclosing, asynccontextmanager
from typing import AsyncIterable, Optional, cast

import msgspec
import trio

from . import decimals, editor, sequencer
from .editor import OperandEditState
from .inactivity import InactivityTimer, earliest_deadline
from .keys import KeyEvent
from .keystreams import MapCharacters, Section, pump_all
from .sequencer import CalculatorSnapshot
from .settings import Settings

logger = logging.getLogger(__name__)


class ClearLabel(msgspec.Struct, frozen=True):
    text: str


EngineOutput = CalculatorSnapshot | ClearLabel


class CalculatorEngine(Section):
    """Interprets key events into calculator snapshots and clear button labels.

    This is the only consumer of the key event stream. Each event is handed to the sequencer (for operator, clear and enter
    keys), then to the operand editor, then, if the editor's transition is visible, back to the sequencer as an operand
    edit. Handling every layer from one loop is what keeps them looking at the same event in the same order.

    Each layer has its own inactivity timer. Every key event re-arms both; whichever deadline passes first before the next
    key event resets its layer.
    """

    operand: OperandEditState
    snapshot: CalculatorSnapshot

    def __init__(self, settings: Settings):
        self.context = decimals.make_context(settings.precision)
        self.operand = OperandEditState()
        self.snapshot = CalculatorSnapshot()
        self.editor_timer = InactivityTimer("operand", settings.editor_timeout, editor.reset)
        self.expression_timer = InactivityTimer("expression", settings.expression_timeout, sequencer.reset)

    @property
    def clear_label(self):
        # follows the editor, not the active register: after an enter the editor holds "0" and the label reads "AC",
        # even though a clear then only zeroes the result
        return ClearLabel(text=editor.clear_label(self.operand))

    def handle_key(self, event: KeyEvent) -> list[EngineOutput]:
        logger.debug("key %s", event.identity.name)
        previous_value = self.operand.value
        self.snapshot = sequencer.apply_key(self.snapshot, event, self.context)
        self.operand = editor.apply_key(self.operand, event, self.context)
        if (value := editor.visible_value(self.operand)) is not None:
            self.snapshot = sequencer.apply_operand(self.snapshot, value)
        self.editor_timer.arm()
        self.expression_timer.arm()

        outputs: list[EngineOutput] = []
        if self.operand.value != previous_value:
            outputs.append(self.clear_label)
        outputs.append(self.snapshot)
        return outputs

    def handle_timeouts(self) -> list[EngineOutput]:
        outputs: list[EngineOutput] = []
        if self.editor_timer.expired():
            previous_value = self.operand.value
            self.operand = self.editor_timer.fire(self.operand)
            if self.operand.value != previous_value:
                outputs.append(self.clear_label)
        if self.expression_timer.expired():
            self.snapshot = self.expression_timer.fire(self.snapshot)
            outputs.append(self.snapshot)
        return outputs

    async def pump(self, source: trio.MemoryReceiveChannel[KeyEvent], sink: trio.MemorySendChannel[EngineOutput]):
        async with aclosing(source), aclosing(sink):
            await sink.send(self.clear_label)
            await sink.send(self.snapshot)
            while True:
                event: Optional[KeyEvent] = None
                with trio.move_on_at(earliest_deadline(self.editor_timer, self.expression_timer)):
                    try:
                        event = await source.receive()
                    except trio.EndOfChannel:
                        return
                outputs = self.handle_timeouts() if event is None else self.handle_key(event)
                for output in outputs:
                    await sink.send(output)


@asynccontextmanager
async def make_calculator_stream(character_source: AsyncIterable[str], settings: Settings):
    sections = [
        MapCharacters(settings.keymap),
        CalculatorEngine(settings),
    ]

    async with pump_all(character_source, *sections) as outputs:
        yield cast(trio.MemoryReceiveChannel[EngineOutput], outputs)
