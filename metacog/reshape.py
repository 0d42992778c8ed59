"""Wide-to-long reshaping of per-participant experiment tables.

The wide layout has one row per participant and four column families per
item ``n``: ``a{n}`` (correctness), ``c{n}`` (confidence), ``d{n}``
(decision) and ``t{n}`` (response time). The long layout has one row per
(participant, item) pair.

"""

import logging
import re

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

ID_COL = "id"
ITEM_COL = "item"
LONG_COLUMNS = {
    "a": "correct",
    "c": "confidence",
    "d": "decision",
    "t": "rt",
}
REQUIRED_FAMILIES = ("a", "c")

_ITEM_COLUMN = re.compile(r"^([acdt])(\d+)$")


def item_indices(columns) -> list[int]:
    """Sorted item indices found in ``a{n}/c{n}/d{n}/t{n}`` column names."""
    found = set()
    for col in columns:
        m = _ITEM_COLUMN.match(str(col))
        if m:
            found.add(int(m.group(2)))
    return sorted(found)


def wide_to_long(wide: pd.DataFrame, id_col: str = ID_COL) -> pd.DataFrame:
    """
    Reshape a wide participant table into long format.

    Args:
        wide: One row per participant with an ``id_col`` column and the
            ``a{n}``/``c{n}`` families (``d{n}``/``t{n}`` optional).
        id_col: Name of the participant identifier column.

    Returns:
        DataFrame with columns ``id, item, correct, confidence, decision,
        rt`` and ``len(wide) * K`` rows, sorted by participant then item.
        Absent decision or response-time columns are filled with ``nan``.

    Raises:
        ValueError: If ``id_col`` is missing, participant ids repeat, no
            item columns are found, or an item lacks ``a{n}`` or ``c{n}``.
    """
    if id_col not in wide.columns:
        raise ValueError(f"id column {id_col!r} not found.")
    if wide[id_col].duplicated().any():
        raise ValueError(f"Participant ids in {id_col!r} must be unique.")

    items = item_indices(wide.columns)
    if not items:
        raise ValueError("No item columns (a{n}, c{n}, d{n}, t{n}) found.")
    for n in items:
        for fam in REQUIRED_FAMILIES:
            if f"{fam}{n}" not in wide.columns:
                raise ValueError(f"Item {n} is missing column {fam}{n}.")

    frames = []
    for n in items:
        part = pd.DataFrame({ID_COL: wide[id_col].to_numpy(), ITEM_COL: n})
        for fam, name in LONG_COLUMNS.items():
            col = f"{fam}{n}"
            part[name] = wide[col].to_numpy() if col in wide.columns else np.nan
        frames.append(part)

    long = pd.concat(frames, ignore_index=True)
    long = long.sort_values([ID_COL, ITEM_COL], kind="stable").reset_index(drop=True)
    logger.debug(
        "Reshaped %d participants x %d items into %d rows",
        len(wide),
        len(items),
        len(long),
    )
    return long


__all__ = [
    "ID_COL",
    "ITEM_COL",
    "LONG_COLUMNS",
    "item_indices",
    "wide_to_long",
]
