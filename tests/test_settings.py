import datetime
import json

import cattrs
import pytest

from pocketcalc.keys import KeyIdentity
from pocketcalc.settings import Settings


def test_defaults():
    settings = Settings.default()
    assert settings.editor_timeout == datetime.timedelta(seconds=5)
    assert settings.expression_timeout == datetime.timedelta(seconds=5)
    assert settings.precision == 20
    assert settings.keymap["7"] is KeyIdentity.SEVEN
    assert settings.keymap["="] is KeyIdentity.ENTER


def test_load_merges_with_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"expression_timeout": 2500, "keymap": {"e": "ENTER"}}))
    settings = Settings.load(path)
    assert settings.expression_timeout == datetime.timedelta(milliseconds=2500)
    assert settings.editor_timeout == datetime.timedelta(seconds=5)
    assert settings.keymap == {"e": KeyIdentity.ENTER}


def test_save(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{}")
    settings = Settings.load(path)
    settings.precision = 12
    settings.save()
    raw = json.loads(path.read_text())
    assert raw["precision"] == 12
    assert raw["editor_timeout"] == 5000
    assert raw["keymap"]["/"] == "DIVIDE"
    assert "_path" not in raw


@pytest.mark.parametrize("timeout", [0, -5, "5s", 2.5])
def test_invalid_timeout(tmp_path, timeout):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"editor_timeout": timeout}))
    with pytest.raises(cattrs.errors.ClassValidationError):
        Settings.load(path)


@pytest.mark.parametrize("precision", [0, -3, "20", 4.5, True])
def test_invalid_precision(tmp_path, precision):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"precision": precision}))
    with pytest.raises(cattrs.errors.ClassValidationError):
        Settings.load(path)


def test_precision_is_loaded(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"precision": 8}))
    assert Settings.load(path).precision == 8
