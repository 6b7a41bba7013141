"""
NSFW Level Flags

Content maturity is stored as a bitmask: every rating is a single bit and a
viewer's browsing level is the union of the ratings they allow. An item is
visible at a browsing level when the two masks overlap.
"""

from enum import IntFlag
from typing import Iterable, List, Union


class NsfwLevel(IntFlag):
    """Single-bit content ratings."""
    PG = 1
    PG13 = 2
    R = 4
    X = 8
    XXX = 16
    Blocked = 32


# Unrated content carries no bits at all
UNRATED_LEVEL = 0

PUBLIC_BROWSING_LEVELS = int(NsfwLevel.PG)
SFW_BROWSING_LEVELS = int(NsfwLevel.PG | NsfwLevel.PG13)
NSFW_BROWSING_LEVELS = int(NsfwLevel.R | NsfwLevel.X | NsfwLevel.XXX)
ALL_BROWSING_LEVELS = SFW_BROWSING_LEVELS | NSFW_BROWSING_LEVELS

BROWSING_LEVEL_PRESETS = {
    'public': PUBLIC_BROWSING_LEVELS,
    'sfw': SFW_BROWSING_LEVELS,
    'nsfw': NSFW_BROWSING_LEVELS,
    'all': ALL_BROWSING_LEVELS,
}


def has_overlap(level: int, mask: int) -> bool:
    """Return True if any bit of ``level`` is present in ``mask``."""
    return (int(level) & int(mask)) != 0


def add_flag(mask: int, flag: int) -> int:
    return int(mask) | int(flag)


def remove_flag(mask: int, flag: int) -> int:
    return int(mask) & ~int(flag)


def to_instances(mask: int) -> List[NsfwLevel]:
    """Split a mask into its single-bit NsfwLevel members, lowest first."""
    return [level for level in NsfwLevel if int(mask) & level]


def from_names(value: Union[str, int, Iterable[str]]) -> int:
    """
    Parse a browsing level from an int, a preset name or level names.

    Accepts ``12``, ``"12"``, ``"sfw"``, ``"PG,PG13,R"`` or an iterable of
    names. Names are case-insensitive.

    Raises:
        ValueError: If a name is not a known level or preset
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid browsing level: {value!r}")
    if isinstance(value, int):
        return value

    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
        names = [part.strip() for part in text.split(',') if part.strip()]
    else:
        names = [str(part).strip() for part in value]

    lookup = {level.name.lower(): int(level) for level in NsfwLevel}
    mask = 0
    for name in names:
        key = name.lower()
        if key in BROWSING_LEVEL_PRESETS:
            mask |= BROWSING_LEVEL_PRESETS[key]
        elif key in lookup:
            mask |= lookup[key]
        else:
            valid = ', '.join(sorted(list(lookup) + list(BROWSING_LEVEL_PRESETS)))
            raise ValueError(f"Unknown NSFW level '{name}'. Valid names: {valid}")
    return mask
