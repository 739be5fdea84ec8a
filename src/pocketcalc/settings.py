# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import dataclasses
import datetime
import json
import operator
import pathlib
import typing

import cattrs

from .decimals import DEFAULT_PRECISION
from .keys import KeyIdentity

# terminal characters for each calculator key
KEYMAP = {
    "0": "ZERO",
    "1": "ONE",
    "2": "TWO",
    "3": "THREE",
    "4": "FOUR",
    "5": "FIVE",
    "6": "SIX",
    "7": "SEVEN",
    "8": "EIGHT",
    "9": "NINE",
    ".": "POINT",
    ",": "POINT",
    "~": "PLUS_MINUS",
    "n": "PLUS_MINUS",
    "%": "PERCENT",
    "+": "ADD",
    "-": "SUBTRACT",
    "*": "MULTIPLY",
    "x": "MULTIPLY",
    "/": "DIVIDE",
    "c": "CLEAR",
    "C": "CLEAR",
    "=": "ENTER",
}

INACTIVITY_TIMEOUT = 5000


def unstructure_timedelta(val: datetime.timedelta) -> int:
    return val // datetime.timedelta(milliseconds=1)


def structure_timedelta(val: int, typ: type[datetime.timedelta]) -> datetime.timedelta:
    if isinstance(val, bool) or not isinstance(val, int):
        raise ValueError(f"Expected whole milliseconds, got {val!r}")
    if val <= 0:
        raise ValueError(f"Timeouts must be positive, got {val!r}")
    return datetime.timedelta(milliseconds=val)


def structure_precision(val: int, typ: type[int]) -> int:
    if isinstance(val, bool) or not isinstance(val, int):
        raise ValueError(f"Expected a whole number of digits, got {val!r}")
    if val <= 0:
        raise ValueError(f"Precision must be positive, got {val!r}")
    return val


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(datetime.timedelta, unstructure_timedelta)
settings_converter.register_structure_hook(datetime.timedelta, structure_timedelta)
settings_converter.register_unstructure_hook(KeyIdentity, operator.attrgetter("name"))
settings_converter.register_structure_hook(KeyIdentity, lambda v, _: KeyIdentity[v])


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: typing.Optional[pathlib.Path] = None
    editor_timeout: datetime.timedelta
    expression_timeout: datetime.timedelta
    precision: int
    keymap: dict[str, KeyIdentity]

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        if dest is None:
            raise ValueError("Settings have no path to save to")
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as outfile:
            json.dump(raw, outfile, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as infile:
            raw = json.load(infile)
        # a settings file may override only some keys
        merged = settings_converter.unstructure(cls.default())
        merged.update(raw)
        merged["_path"] = src
        return settings_converter.structure(merged, cls)

    @classmethod
    def default(cls):
        return settings_converter.structure(
            {
                "editor_timeout": INACTIVITY_TIMEOUT,
                "expression_timeout": INACTIVITY_TIMEOUT,
                "precision": DEFAULT_PRECISION,
                "keymap": KEYMAP,
            },
            cls,
        )

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "editor_timeout": INACTIVITY_TIMEOUT,
                "expression_timeout": INACTIVITY_TIMEOUT,
                "precision": DEFAULT_PRECISION,
                "keymap": KEYMAP,
            },
            cls,
        )


settings_converter.register_structure_hook(
    Settings,
    cattrs.gen.make_dict_structure_fn(
        Settings, settings_converter, precision=cattrs.gen.override(struct_hook=structure_precision)
    ),
)
