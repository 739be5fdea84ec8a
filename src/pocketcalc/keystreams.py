# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
import logging
from contextlib import aclosing, asynccontextmanager
from typing import Any, AsyncIterable

import trio

from .keys import KeyEvent, KeyIdentity

logger = logging.getLogger(__name__)


class Section(abc.ABC):
    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


# stage 1: convert characters into calculator key events
class MapCharacters(Section):
    def __init__(self, keymap: dict[str, KeyIdentity]):
        self.keymap = keymap

    async def pump(self, source: trio.MemoryReceiveChannel[str], sink: trio.MemorySendChannel[KeyEvent]):
        async with aclosing(source), aclosing(sink):
            async for text in source:
                for character in text:
                    identity = self.keymap.get(character)
                    if identity is None:
                        if not character.isspace():
                            logger.debug("Dropping unmapped character %r", character)
                        continue
                    await sink.send(KeyEvent.of(identity))


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    async with trio.open_nursery() as nursery:
        section_input = first_source
        for section in sections:
            section_send_channel, section_receive_channel = trio.open_memory_channel(0)
            nursery.start_soon(section.pump, section_input, section_send_channel)
            section_input = section_receive_channel
        yield section_input
        nursery.cancel_scope.cancel()
