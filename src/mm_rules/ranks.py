"""Static rank ladders: tier label -> comparable ordinal."""

DEADLOCK_RANK_ORDER: dict[str, int] = {
    "INITIATE": 1,
    "SEEKER": 2,
    "ALCHEMIST": 3,
    "ARCANIST": 4,
    "RITUALIST": 5,
    "EMISSARY": 6,
    "ARCHON": 7,
    "ORACLE": 8,
    "PHANTOM": 9,
    "ASCENDANT": 10,
    "ETERNUS": 11,
}

_VALORANT_TIERS = (
    "IRON", "BRONZE", "SILVER", "GOLD", "PLATINUM", "DIAMOND", "ASCENDANT", "IMMORTAL",
)

# IRON_1 = 1 ... IMMORTAL_3 = 24, RADIANT = 25
VALORANT_RANK_ORDER: dict[str, int] = {
    f"{tier}_{division}": i * 3 + division
    for i, tier in enumerate(_VALORANT_TIERS)
    for division in (1, 2, 3)
}
VALORANT_RANK_ORDER["RADIANT"] = len(VALORANT_RANK_ORDER) + 1


def normalize_label(label: str) -> str:
    """'gold 2' / 'Gold-2' -> 'GOLD_2'."""
    return "_".join(label.strip().upper().replace("-", " ").split())


def rank_ordinal(table: dict[str, int], label: object) -> int | None:
    """Look up a rank label; None when it is not a string or not on the ladder."""
    if not isinstance(label, str):
        return None
    return table.get(normalize_label(label))
