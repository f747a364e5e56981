"""Round catalog lookups."""

from roleplay.models.prompt import LevelId, wire_value
from roleplay.models.scenario import Round, RoundCatalog


def rounds_for_level(
    catalog: RoundCatalog | None, level: LevelId | str
) -> tuple[Round, ...]:
    """
    Get the rounds that apply to a level.

    A flat sequence applies to every level. A level-keyed catalog without an
    entry for the level means no rounds.

    @param catalog - Scenario round catalog, if any
    @param level - Level id
    @returns Ordered rounds (possibly empty), as an immutable tuple
    """
    if catalog is None:
        return ()

    if isinstance(catalog, (tuple, list)):
        return tuple(catalog)

    level = wire_value(level)
    for key, rounds in catalog.items():
        if wire_value(key) == level:
            return tuple(rounds)
    return ()


def has_rounds(catalog: RoundCatalog | None, level: LevelId | str) -> bool:
    """Check whether a level has predefined rounds."""
    return len(rounds_for_level(catalog, level)) > 0


def find_round(rounds: tuple[Round, ...], round_id: int | None) -> Round | None:
    """Get a round by id."""
    if round_id is None:
        return None
    return next((r for r in rounds if r.id == round_id), None)
