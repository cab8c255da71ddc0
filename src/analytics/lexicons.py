"""Immutable lookup tables parameterizing the analytics engines."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

STOP_WORDS: frozenset[str] = frozenset(
    """
    the a an and or but in on at to for of with by is are was were be been
    have has had do does did will would could should may might can this that
    these those i you he she it we they me him her us them my your his its
    our their says said after new first last over more also just now than
    only other some time very when come during back general however out many
    from up about into through before under around among between while where
    why how what who which whose whom get got make made take took give gave
    go went see saw know knew think thought look looked use used find found
    work worked call called try tried ask asked need needed feel felt become
    became leave left put keep kept let begin began seem seemed help helped
    talk talked turn turned start started show showed hear heard play played
    run ran move moved live lived believe believed bring brought happen
    happened write wrote provide provided sit sat stand stood lose lost pay
    paid meet met include included continue continued set tell told
    """.split()
)

POSITIVE_WORDS: frozenset[str] = frozenset(
    """
    good great excellent amazing wonderful fantastic success win victory
    achievement breakthrough progress improve improves better best positive
    optimistic hope celebrate joy happy pleased excited thrilled proud love
    like enjoy benefit gain profit growth increase rise boost advance forward
    rally surge
    """.split()
)

NEGATIVE_WORDS: frozenset[str] = frozenset(
    """
    bad terrible awful horrible disaster crisis problem issue concern worry
    fear danger risk threat attack violence war conflict fight death kill
    murder crime steal fraud corruption scandal controversy decline fall drop
    decrease loss fail failure reject deny oppose against protest angry mad
    upset sad disappointed frustrated hate
    """.split()
)

# Order is significant: an article lands in the first category with a match.
CATEGORY_TABLE: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Technology", ("tech", "ai", "artificial intelligence", "software", "digital", "cyber", "innovation")),
    ("Business", ("business", "economy", "market", "finance", "company", "corporate", "trade")),
    ("Health", ("health", "medical", "hospital", "doctor", "medicine", "covid", "vaccine")),
    ("Politics", ("politics", "government", "election", "policy", "congress", "senate", "president")),
    ("Sports", ("sports", "football", "basketball", "soccer", "olympics", "game", "team")),
    ("Entertainment", ("entertainment", "movie", "music", "celebrity", "film", "show", "actor")),
    ("Science", ("science", "research", "study", "discovery", "climate", "space", "environment")),
)
OTHER_CATEGORY = "Other"
CATEGORY_LABELS: Tuple[str, ...] = tuple(label for label, _ in CATEGORY_TABLE) + (OTHER_CATEGORY,)

CHART_COLORS: Tuple[str, ...] = (
    "hsl(45, 93%, 47%)",
    "hsl(35, 91%, 62%)",
    "hsl(25, 95%, 53%)",
    "hsl(55, 84%, 51%)",
    "hsl(15, 86%, 59%)",
    "hsl(65, 77%, 45%)",
    "hsl(40, 89%, 43%)",
    "hsl(30, 87%, 55%)",
)

POSITIVE = "Positive"
NEUTRAL = "Neutral"
NEGATIVE = "Negative"

SENTIMENT_COLORS: Mapping[str, str] = MappingProxyType(
    {
        POSITIVE: "hsl(120, 70%, 50%)",
        NEUTRAL: "hsl(45, 93%, 47%)",
        NEGATIVE: "hsl(0, 70%, 50%)",
    }
)


def palette_color(index: int) -> str:
    """Color for the ``index``-th series, cycling through CHART_COLORS."""

    return CHART_COLORS[index % len(CHART_COLORS)]


__all__ = [
    "CATEGORY_LABELS",
    "CATEGORY_TABLE",
    "CHART_COLORS",
    "NEGATIVE",
    "NEGATIVE_WORDS",
    "NEUTRAL",
    "OTHER_CATEGORY",
    "POSITIVE",
    "POSITIVE_WORDS",
    "SENTIMENT_COLORS",
    "STOP_WORDS",
    "palette_color",
]
