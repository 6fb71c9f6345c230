from __future__ import annotations

from argsplit import split
from argsplit.models import GroupKind, Token
from argsplit.sequence import TokenSequence

TEXT = 'deploy "staging east" `--dry-run` now'


def test_length_and_get():
    args = split(TEXT)

    assert len(args) == args.length() == 4
    assert args.get(0) == "deploy"
    assert args.get(1) == "staging east"
    assert args.get(2) == "--dry-run"
    assert args.get(4) is None
    assert args.get(-1) is None


def test_token_metadata():
    args = split(TEXT)

    assert args.token(1) == Token("staging east", GroupKind.QUOTED, 7)
    assert args.token(2).is_code
    assert args.token(9) is None


def test_restore_from_each_argument():
    args = split(TEXT)

    assert args.restore() == TEXT
    assert args.restore(1) == '"staging east" `--dry-run` now'
    assert args.restore(2) == "`--dry-run` now"
    assert args.restore(3) == "now"


def test_restore_range():
    args = split(TEXT)

    assert args.restore(1, 3) == '"staging east" `--dry-run` '
    assert args.restore(0, 1) == "deploy "
    assert args.restore(2, 2) == ""


def test_restore_clamps_out_of_range_indices():
    args = split(TEXT)

    assert args.restore(10) == ""
    assert args.restore(1, 99) == args.restore(1)


def test_restore_skips_leading_whitespace_only():
    args = split('   a  \\"b c  ')

    assert args.restore() == 'a  \\"b c  '
    assert args.restore(1) == '\\"b c  '


def test_restore_on_empty_sequence():
    assert split("   ").restore() == ""


def test_shift_removes_first_argument():
    args = split("a b c")

    assert args.shift() == "a"
    assert len(args) == 2
    assert args.get(0) == "b"
    assert args.restore() == "b c"


def test_shift_on_empty_sequence():
    args = split("")

    assert args.shift() is None
    assert len(args) == 0


def test_slice_shares_original_and_leaves_receiver_untouched():
    args = split(TEXT)

    section = args.slice(1, 3)

    assert section.original is args.original
    assert [token.content for token in section] == ["staging east", "--dry-run"]
    assert section.restore() == '"staging east" `--dry-run` now'
    assert len(args) == 4


def test_slice_defaults_and_clamping():
    args = split("a b c")

    assert args.slice() == args
    assert args.slice(1).length() == 2
    assert args.slice(2, 10).length() == 1
    assert args.slice(5).length() == 0


def test_shifting_a_slice_does_not_affect_source():
    args = split("a b c")
    section = args.slice()

    section.shift()

    assert len(args) == 3


def test_tokens_view_is_read_only():
    args = split("a b")

    assert isinstance(args.tokens, tuple)
    assert args.tokens == (Token("a", GroupKind.PLAIN, 0), Token("b", GroupKind.PLAIN, 2))


def test_equality_and_repr():
    assert TokenSequence("a", [Token("a", GroupKind.PLAIN, 0)]) == split("a")
    assert TokenSequence("a") != split("a")
    assert repr(TokenSequence("")) == "TokenSequence(original='', tokens=[])"


def test_negative_indices_clamp_to_first_argument():
    args = split("a b c")

    assert args.get(-1) is None
    assert args.restore(-1) == "a b c"
    assert args.restore(-3, 2) == "a b "
    assert args.restore(0, -1) == ""
