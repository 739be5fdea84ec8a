import pytest

from pocketcalc import sequencer
from pocketcalc.commontypes import InternalConsistencyError
from pocketcalc.keys import KeyEvent, KeyIdentity
from pocketcalc.sequencer import CalculatorSnapshot, Step


def test_operand_edits_fill_the_live_register():
    snapshot = sequencer.apply_operand(CalculatorSnapshot(), "12")
    assert snapshot == CalculatorSnapshot(step=Step.CHANGE_FIRST, first="12")
    snapshot = sequencer.apply_operand(snapshot, "123")
    assert snapshot == CalculatorSnapshot(step=Step.CHANGE_FIRST, first="123")

    snapshot = sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.SUBTRACT))
    assert snapshot == CalculatorSnapshot(step=Step.WAIT_SECOND, first="123", operator=KeyIdentity.SUBTRACT)
    snapshot = sequencer.apply_operand(snapshot, "4")
    assert snapshot == CalculatorSnapshot(step=Step.CHANGE_SECOND, first="123", second="4", operator=KeyIdentity.SUBTRACT)


def test_operator_replaces_pending_operator():
    snapshot = CalculatorSnapshot(step=Step.WAIT_SECOND, first="3", operator=KeyIdentity.ADD)
    snapshot = sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.DIVIDE))
    assert snapshot == CalculatorSnapshot(step=Step.WAIT_SECOND, first="3", operator=KeyIdentity.DIVIDE)


def test_operator_after_second_operand_applies_pressed_operator():
    snapshot = CalculatorSnapshot(step=Step.CHANGE_SECOND, first="3", second="4", operator=KeyIdentity.ADD)
    snapshot = sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.MULTIPLY))
    assert snapshot == CalculatorSnapshot(step=Step.WAIT_SECOND, first="12", second="4", operator=KeyIdentity.MULTIPLY)


@pytest.mark.parametrize(
    "snapshot,expected",
    (
        (
            CalculatorSnapshot(step=Step.CHANGE_SECOND, first="1", second="1", operator=KeyIdentity.ADD),
            CalculatorSnapshot(step=Step.WAIT_FIRST, first="2", second="1", operator=KeyIdentity.ADD),
        ),
        # repeated equals re-applies the last operator and second operand
        (
            CalculatorSnapshot(step=Step.WAIT_FIRST, first="2", second="1", operator=KeyIdentity.ADD),
            CalculatorSnapshot(step=Step.WAIT_FIRST, first="3", second="1", operator=KeyIdentity.ADD),
        ),
        (
            CalculatorSnapshot(step=Step.CHANGE_FIRST, first="10", second="4", operator=KeyIdentity.SUBTRACT),
            CalculatorSnapshot(step=Step.WAIT_FIRST, first="6", second="4", operator=KeyIdentity.SUBTRACT),
        ),
        # no second operand yet: the first is used for both
        (
            CalculatorSnapshot(step=Step.WAIT_SECOND, first="5", second="9", operator=KeyIdentity.MULTIPLY),
            CalculatorSnapshot(step=Step.WAIT_FIRST, first="25", second="5", operator=KeyIdentity.MULTIPLY),
        ),
        (
            CalculatorSnapshot(step=Step.CHANGE_FIRST, first="0.5"),
            CalculatorSnapshot(step=Step.WAIT_FIRST, first="0.5"),
        ),
        (
            CalculatorSnapshot(step=Step.CHANGE_SECOND, first="1", second="3", operator=KeyIdentity.DIVIDE),
            CalculatorSnapshot(step=Step.WAIT_FIRST, first="0.33333333333333333333", second="3", operator=KeyIdentity.DIVIDE),
        ),
    ),
)
def test_enter(snapshot, expected):
    assert sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.ENTER)) == expected


@pytest.mark.parametrize(
    "snapshot",
    (
        CalculatorSnapshot(step=Step.CHANGE_FIRST, first="0", second="7", operator=KeyIdentity.MULTIPLY),
        CalculatorSnapshot(step=Step.WAIT_FIRST, first="-0", second="7", operator=KeyIdentity.MULTIPLY),
        CalculatorSnapshot(step=Step.CHANGE_SECOND, first="7", second="0", operator=KeyIdentity.DIVIDE),
    ),
)
def test_clear_on_zero_register_resets_everything(snapshot):
    cleared = sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.CLEAR))
    assert cleared == CalculatorSnapshot(skip_operand=True)
    # the editor's "0" arriving right behind the clear is swallowed
    assert sequencer.apply_operand(cleared, "0") == CalculatorSnapshot()


def test_clear_on_nonzero_register_is_left_to_the_editor():
    snapshot = CalculatorSnapshot(step=Step.CHANGE_SECOND, first="7", second="3", operator=KeyIdentity.SUBTRACT)
    assert sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.CLEAR)) is snapshot


def test_number_keys_do_not_change_snapshot():
    snapshot = CalculatorSnapshot(step=Step.CHANGE_FIRST, first="7")
    assert sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.SEVEN)) is snapshot
    assert sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.PERCENT)) is snapshot


def test_reset():
    snapshot = CalculatorSnapshot(step=Step.CHANGE_SECOND, first="7", second="3", operator=KeyIdentity.SUBTRACT, skip_operand=True)
    assert sequencer.reset(snapshot) == CalculatorSnapshot()


def test_division_by_zero_shows_error():
    snapshot = CalculatorSnapshot(step=Step.CHANGE_SECOND, first="1", second="0", operator=KeyIdentity.DIVIDE)
    result = sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.ENTER))
    assert result == CalculatorSnapshot(error=True)
    # the next edit starts over and clears the error
    assert sequencer.apply_operand(result, "4") == CalculatorSnapshot(step=Step.CHANGE_FIRST, first="4")


def test_chained_division_by_zero_shows_error():
    snapshot = CalculatorSnapshot(step=Step.CHANGE_SECOND, first="0", second="0", operator=KeyIdentity.ADD)
    assert sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.DIVIDE)) == CalculatorSnapshot(error=True)


def test_unknown_operator_is_fatal():
    with pytest.raises(InternalConsistencyError):
        sequencer.operate("1", "2", KeyIdentity.PERCENT)


def test_active_register():
    assert CalculatorSnapshot(step=Step.CHANGE_FIRST, first="1", second="2").active == "1"
    assert CalculatorSnapshot(step=Step.WAIT_SECOND, first="1", second="2").active == "2"


def test_overflow_shows_error():
    huge = "1" + "0" * 600000
    snapshot = CalculatorSnapshot(step=Step.CHANGE_SECOND, first=huge, second=huge, operator=KeyIdentity.ADD)
    assert sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.MULTIPLY)) == CalculatorSnapshot(error=True)
    snapshot = CalculatorSnapshot(step=Step.CHANGE_SECOND, first=huge, second=huge, operator=KeyIdentity.MULTIPLY)
    result = sequencer.apply_key(snapshot, KeyEvent.of(KeyIdentity.ENTER))
    assert result == CalculatorSnapshot(error=True)
    assert sequencer.apply_operand(result, "4") == CalculatorSnapshot(step=Step.CHANGE_FIRST, first="4")
