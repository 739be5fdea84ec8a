# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import argparse
import logging
import os
import pathlib
import sys
from typing import AsyncIterable, Optional

import tricycle
import trio
import trio.lowlevel

from .display import TerminalDisplay, project
from .engine import ClearLabel, EngineOutput, make_calculator_stream
from .sequencer import CalculatorSnapshot
from .settings import Settings

logger = logging.getLogger(__name__)


class Session:
    clear_label: str
    snapshot: Optional[CalculatorSnapshot]

    def __init__(self, display: TerminalDisplay):
        self.display = display
        self.clear_label = "AC"
        self.snapshot = None

    async def run(self, outputs: AsyncIterable[EngineOutput]):
        async for output in outputs:
            match output:
                case ClearLabel(text=text):
                    self.clear_label = text
                case CalculatorSnapshot():
                    self.snapshot = output
                    self.display.show(project(self.snapshot, self.clear_label))
                case _:
                    raise NotImplementedError(f"Don't know how to display {type(output)}.")


async def scripted_keys(keys: str):
    for key in keys:
        await trio.lowlevel.checkpoint()
        yield key


async def terminal_keys():
    # dup so that closing the stream leaves the interpreter's stdin alone
    async with tricycle.TextReceiveStream(trio.lowlevel.FdStream(os.dup(sys.stdin.fileno()))) as stdin:
        while line := await stdin.receive_line():
            yield line.rstrip("\n")


async def run_calculator(settings: Settings, keys: Optional[str]):
    display = TerminalDisplay(sys.stdout.write)
    if keys is None:
        display.show_keypad("AC")
        source = terminal_keys()
    else:
        source = scripted_keys(keys)
    async with make_calculator_stream(source, settings) as outputs:
        await Session(display).run(outputs)
    logger.debug("goodbye")


parser = argparse.ArgumentParser(prog="pocketcalc")
parser.add_argument("--settings", type=pathlib.Path)
parser.add_argument("--keys", help="press these keys, print each display, then exit")
parser.add_argument("--verbose", action="store_true")


def main(argv=sys.argv):
    """
    Args:
        argv (list): List of arguments

    Returns:
        int: A return code
    """
    parsed = parser.parse_args(argv[1:])
    logging.basicConfig(level=logging.DEBUG if parsed.verbose else logging.WARNING)
    settings = Settings.default() if parsed.settings is None else Settings.load(parsed.settings)
    trio.run(run_calculator, settings, parsed.keys)
    return 0
