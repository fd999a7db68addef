"""Instrument ranking used when grouping drum map entries by tag.

REAPER draws the first note-name line at the *bottom* of the piano roll, so
the authored list below reads top-of-screen first and is reversed before use:
index 0 of :data:`PREFERRED_ORDERS` is the lowest rank, the last index the
highest.  Tokens with a numeric suffix only match tags carrying the same
number; bare tokens match any tag that contains them.
"""

from __future__ import annotations

from typing import List

# Top of the piano roll first.
AUTHORED_ORDER: List[str] = [
    "hat",
    "kick",
    "kick 2",
    "kick 1",
    "snare",
    "crash 3",
    "crash 2",
    "crash 1",
    "crash",
    "ride",
    "ride 3",
    "ride 2",
    "ride 1",
    "splash 2",
    "splash 1",
    "splash",
    "cymbal 4",
    "cymbal 3",
    "cymbal 2",
    "cymbal 1",
    "cymbal",
    "racktom 4",
    "racktom 3",
    "racktom 2",
    "racktom 1",
    "racktom",
    "floortom 4",
    "floortom 3",
    "floortom 2",
    "floortom 1",
    "floortom",
]

PREFERRED_ORDERS: List[str] = list(reversed(AUTHORED_ORDER))
