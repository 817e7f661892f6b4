"""
Lotto 6/45 Frequency Analysis

Counts how often each number 1-45 has been drawn and ranks the domain into
three equal frequency tiers.

Data schema expected:
    draw_number, date, num1-num6, bonus

Numbers range 1-45. Six main numbers plus one bonus per draw.
"""

import numpy as np
import pandas as pd


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

NUM_COLS = [f"num{i}" for i in range(1, 7)]
FRAME_COLS = ["draw_number", "date"] + NUM_COLS + ["bonus"]
MAX_NUMBER = 45
ALL_NUMBERS = list(range(1, MAX_NUMBER + 1))
TIER_SIZE = MAX_NUMBER // 3


def draws_to_frame(records) -> pd.DataFrame:
    """
    Convert a list of draw dicts into the one-row-per-draw DataFrame.

    Accepts the stored record shape (``drwNo``, ``date``, ``numbers``,
    ``bonus``) as well as ``number`` for the draw number.
    """
    rows = []
    for rec in records:
        nums = sorted(int(n) for n in rec["numbers"])
        row = {
            "draw_number": rec.get("drwNo", rec.get("number")),
            "date": rec.get("date"),
            "bonus": rec.get("bonus"),
        }
        for i, n in enumerate(nums):
            row[f"num{i + 1}"] = n
        rows.append(row)
    return pd.DataFrame(rows, columns=FRAME_COLS)


def _as_frame(draws) -> pd.DataFrame:
    if isinstance(draws, pd.DataFrame):
        return draws
    return draws_to_frame(draws)


# ===================================================================
# 1. Frequency
# ===================================================================

def compute_frequency(draws, include_bonus=False) -> np.ndarray:
    """
    Count appearances of each number across past draws.

    Parameters
    ----------
    draws : pd.DataFrame or list of dict
        Historical draws.
    include_bonus : bool
        Also count each draw's bonus number, when one is present.

    Returns
    -------
    np.ndarray of shape (46,), int64. Index 0 is unused; ``freq[n]`` is the
    count for number ``n``. Numbers never drawn have count 0.
    """
    df = _as_frame(draws)
    main = df[NUM_COLS].to_numpy(dtype=np.int64).ravel()
    freq = np.bincount(main, minlength=MAX_NUMBER + 1).astype(np.int64)

    if include_bonus and "bonus" in df.columns:
        bonus = pd.to_numeric(df["bonus"], errors="coerce")
        bonus = bonus[(bonus >= 1) & (bonus <= MAX_NUMBER)].astype(np.int64)
        freq += np.bincount(bonus.to_numpy(), minlength=MAX_NUMBER + 1)

    return freq


def number_weight(freq, n):
    """Base sampling weight: the draw count, floored at 1."""
    return max(1, int(freq[n]))


# ===================================================================
# 2. Tiers
# ===================================================================

def build_tiers(freq) -> dict:
    """
    Rank 1-45 by descending frequency (ascending number breaks ties) and
    split the ranking into three tiers of 15.

    Returns
    -------
    dict with keys:
        top     : list of the 15 most frequent numbers
        mid     : list of the next 15
        low     : list of the 15 least frequent numbers
        ordered : full ranking of all 45 numbers
    """
    ordered = sorted(ALL_NUMBERS, key=lambda n: (-int(freq[n]), n))
    return {
        "top": ordered[:TIER_SIZE],
        "mid": ordered[TIER_SIZE:2 * TIER_SIZE],
        "low": ordered[2 * TIER_SIZE:],
        "ordered": ordered,
    }


def frequency_table(freq, tiers=None) -> pd.DataFrame:
    """Tabulate counts with each number's tier, for display."""
    if tiers is None:
        tiers = build_tiers(freq)
    tier_of = {}
    for name in ("top", "mid", "low"):
        for n in tiers[name]:
            tier_of[n] = name
    return pd.DataFrame([
        {"Number": n, "Count": int(freq[n]), "Tier": tier_of[n]}
        for n in ALL_NUMBERS
    ])
