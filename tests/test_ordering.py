import pytest
from hypothesis import given, settings, strategies as st

from drmsmith.drummap import NoteEntry
from drmsmith.ordering import (
    EXPLICIT,
    INFERRED,
    UNRANKED,
    extract_tag,
    group_by_preferred,
    preference_rank,
    resolve_order,
    token_matches,
)
from drmsmith.preferred_orders import AUTHORED_ORDER, PREFERRED_ORDERS


def _entries(*pairs):
    return [NoteEntry(note, name) for note, name in pairs]


def test_table_is_reversed():
    assert PREFERRED_ORDERS[0] == "floortom"
    assert PREFERRED_ORDERS[-1] == "hat"
    assert PREFERRED_ORDERS == AUTHORED_ORDER[::-1]


@pytest.mark.parametrize(
    "name,tag",
    [
        ("Kick In [Kick]", "[Kick]"),
        ("No tag", None),
        ("Open [Hat", None),
        ("Close] only", None),
        ("Tom [Rack] [2]", "[Rack]"),
        ("] first [Snare]", "[Snare]"),
        ("[]", "[]"),
    ],
)
def test_extract_tag(name, tag):
    assert extract_tag(name) == tag


@pytest.mark.parametrize(
    "key,rank",
    [
        ("[Kick]", 29),
        ("[Kick 1]", 27),
        ("[Kick 2]", 28),
        ("[Kick 12]", 29),
        ("[Hat]", 30),
        ("[Hi-Hat 2]", 30),
        ("[Snare]", 26),
        ("[Ride 2]", 19),
        ("[Ride Bell]", 21),
        ("[Crash 2]", 22),
        ("[Floortom 2]", 0),
        ("[Floor Tom]", UNRANKED),
        ("[Foo]", UNRANKED),
    ],
)
def test_preference_rank_with_default_table(key, rank):
    assert preference_rank(key) == rank


def test_numbered_token_requires_same_number():
    assert not token_matches("crash 1", "[Crash 2]")
    assert token_matches("crash 2", "[Crash 2]")
    assert preference_rank("[Crash 2]", ["crash 1", "crash 2"]) == 1
    assert preference_rank("[Crash]", ["crash 1", "crash 2"]) == UNRANKED


def test_bare_token_matches_regardless_of_digits():
    assert token_matches("hat", "[Hat 3]")
    assert token_matches("hat", "[HAT]")
    assert preference_rank("[Hat 3]", ["hat 1", "hat"]) == 1


def test_digit_comparison_is_textual():
    assert not token_matches("kick 1", "[Kick 01]")


def test_example_map_unranked_first_then_by_rank():
    entries = _entries(("1", "Kick [Kick]"), ("2", "Hat [Hat]"), ("3", "Unknown [Foo]"))
    assert resolve_order(entries, None, INFERRED) == ["3", "1", "2"]


def test_untagged_entries_are_left_out():
    entries = _entries(("1", "Kick [Kick]"), ("2", "Cowbell"), ("3", "Kick 2 [Kick]"))
    assert resolve_order(entries, None, INFERRED) == ["1", "3"]


def test_group_keys_are_case_sensitive():
    entries = _entries(("1", "A [Kick]"), ("2", "B [kick]"), ("3", "C [Kick]"))
    groups = group_by_preferred(entries)
    assert [(g.key, g.order, g.notes) for g in groups] == [
        ("[Kick]", 29, ["1", "3"]),
        ("[kick]", 29, ["2"]),
    ]


def test_unranked_groups_keep_first_seen_order():
    entries = _entries(("1", "[Snare]"), ("2", "[Foo]"), ("3", "[Bar]"), ("4", "[Foo]"))
    assert resolve_order(entries, None, INFERRED) == ["2", "4", "3", "1"]


def test_explicit_order_replayed():
    entries = _entries(("1", "Kick [Kick]"), ("2", "Hat [Hat]"))
    assert resolve_order(entries, ["2", "1"], EXPLICIT) == ["2", "1"]


def test_explicit_order_drops_unknown_notes():
    entries = _entries(("1", "Kick"), ("2", "Hat"))
    assert resolve_order(entries, ["5", "2", "x", "1"], EXPLICIT) == ["2", "1"]
    assert resolve_order(entries, None, EXPLICIT) == []


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        resolve_order([], None, "alphabetical")


TAGS = ["[Kick]", "[Kick 1]", "[Snare]", "[Hat]", "[Ride 2]", "[Crash]", "[Foo]", "[Bar]", "[racktom 3]"]


@given(tags=st.lists(st.one_of(st.sampled_from(TAGS), st.none()), max_size=30))
@settings(max_examples=100, deadline=None)
def test_inferred_order_is_rank_monotonic(tags):
    entries = [
        NoteEntry(str(i), f"Pad {i} {tag}" if tag else f"Pad {i}") for i, tag in enumerate(tags)
    ]
    out = resolve_order(entries, None, INFERRED)

    rank_of = {str(i): preference_rank(tag) for i, tag in enumerate(tags) if tag}
    assert sorted(out, key=int) == sorted(rank_of, key=int)
    ranks = [rank_of[note] for note in out]
    assert ranks == sorted(ranks)
