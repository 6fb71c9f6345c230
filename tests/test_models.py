import dataclasses

import pytest
from argsplit.models import BacktickRun, GroupKind, ScanState, Token


def test_group_kind_members():
    assert list(GroupKind) == [
        GroupKind.UNSET,
        GroupKind.PLAIN,
        GroupKind.QUOTED,
        GroupKind.CODE,
    ]


def test_scan_state_defaults():
    state = ScanState()

    assert state.kind is GroupKind.UNSET
    assert state.buffer == []
    assert state.start == 0
    assert state.escaped is False
    assert state.matched == 0
    assert state.pending == 0
    assert state.tokens == []


def test_scan_states_do_not_share_lists():
    first = ScanState()
    second = ScanState()

    first.buffer.append("x")

    assert second.buffer == []


def test_token_is_immutable():
    token = Token("a", GroupKind.PLAIN, 0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        token.content = "b"


@pytest.mark.parametrize(
    ("kind", "plain", "quoted", "code"),
    [
        (GroupKind.PLAIN, True, False, False),
        (GroupKind.QUOTED, False, True, False),
        (GroupKind.CODE, False, False, True),
    ],
)
def test_token_kind_predicates(kind, plain, quoted, code):
    token = Token("x", kind, 3)

    assert token.is_plain is plain
    assert token.is_quoted is quoted
    assert token.is_code is code


def test_backtick_run_defaults_to_no_effect():
    assert BacktickRun() == BacktickRun(literal=0, closes=False, complete_groups=0, opens=0, carried=0)
