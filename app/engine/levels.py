"""
Level table.

Level N is reached at LEVEL_XP[N-1] total XP. The first step is 7300 XP,
every later one 6000. XP past the last threshold stays at the top level.
"""

LEVEL_XP = [
    0, 7300, 13300, 19300, 25300, 31300, 37300, 43300, 49300, 55300,
    61300, 67300, 73300, 79300, 85300, 91300, 97300, 103300, 109300, 115300,
]

MAX_LEVEL = len(LEVEL_XP)


def level_of(total_xp: int) -> int:
    """Highest level whose threshold is <= total_xp; never below 1."""
    for i in range(len(LEVEL_XP) - 1, -1, -1):
        if total_xp >= LEVEL_XP[i]:
            return i + 1
    return 1


def xp_to_next_level(total_xp: int) -> dict:
    """
    Progress inside the current level, for progress bars.

    At the top level ``next_level_xp`` is None and ``progress`` is 1.0.
    """
    level = level_of(total_xp)
    floor = LEVEL_XP[level - 1]
    if level >= MAX_LEVEL:
        return {"level": level, "level_xp": floor, "next_level_xp": None, "progress": 1.0}

    ceiling = LEVEL_XP[level]
    progress = (max(total_xp, 0) - floor) / (ceiling - floor)
    return {
        "level": level,
        "level_xp": floor,
        "next_level_xp": ceiling,
        "progress": round(progress, 4),
    }
