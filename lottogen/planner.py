"""
Generation-Type Planner

Decides which strategy produces each output set. The sequence comes from a
fixed template and is then shuffled with the run's stream, so a seed fixes
both the order of strategies and the numbers drawn for them.
"""
from enum import Enum


class GenerationType(Enum):
    """Closed set of pool-selection strategies."""

    HIGH_FREQUENCY = "high-frequency"
    MIXED_WEIGHTED = "mixed-weighted"
    RANGE_BALANCED = "range-balanced"
    HIGH_MID_MIX = "high+mid mix"
    MID_FREQUENCY = "mid-frequency"
    MID_LOW_MIX = "mid+low mix"
    LOW_FREQUENCY = "low-frequency"

    @property
    def label(self):
        return _LABELS[self]

    @property
    def explanation(self):
        return _EXPLANATIONS[self]


_LABELS = {
    GenerationType.HIGH_FREQUENCY: "High frequency",
    GenerationType.MIXED_WEIGHTED: "Mixed weighted",
    GenerationType.RANGE_BALANCED: "Range balance",
    GenerationType.HIGH_MID_MIX: "High + mid mix",
    GenerationType.MID_FREQUENCY: "Mid frequency",
    GenerationType.MID_LOW_MIX: "Mid + low mix",
    GenerationType.LOW_FREQUENCY: "Low frequency",
}

_EXPLANATIONS = {
    GenerationType.HIGH_FREQUENCY:
        "Draws 6 from the most frequently drawn third of the numbers, weighted by count.",
    GenerationType.MIXED_WEIGHTED:
        "Draws 6 from all of 1-45 weighted by count. The most purely frequency-driven set.",
    GenerationType.RANGE_BALANCED:
        "Mixes the 1-10/11-20/21-30/31-40/41-45 bands, with count weighting inside each band.",
    GenerationType.HIGH_MID_MIX:
        "Draws from the high and mid tiers together, softening the pull toward the top tier.",
    GenerationType.MID_FREQUENCY:
        "Draws 6 from the middle tier, weighted by count, to avoid over-concentration.",
    GenerationType.MID_LOW_MIX:
        "Draws from the mid and low tiers together for a strongly varied set.",
    GenerationType.LOW_FREQUENCY:
        "Draws 6 from the least frequently drawn third, weighted by count, as a contrarian spread.",
}

# Fixed order; a request for N sets uses the first N entries.
TYPE_TEMPLATE = (
    GenerationType.HIGH_FREQUENCY,
    GenerationType.MIXED_WEIGHTED,
    GenerationType.RANGE_BALANCED,
    GenerationType.HIGH_MID_MIX,
    GenerationType.MID_FREQUENCY,
    GenerationType.MID_LOW_MIX,
    GenerationType.LOW_FREQUENCY,
    GenerationType.MIXED_WEIGHTED,
    GenerationType.RANGE_BALANCED,
    GenerationType.HIGH_FREQUENCY,
)

MIN_TEMPLATE_SLICE = 5
MAX_SETS = len(TYPE_TEMPLATE)


def shuffle_in_place(seq, rnd):
    """Fisher-Yates shuffle driven by `rnd`; consumes len(seq) - 1 values."""
    for i in range(len(seq) - 1, 0, -1):
        j = int(rnd() * (i + 1))
        seq[i], seq[j] = seq[j], seq[i]
    return seq


def plan_types(count, rnd):
    """
    Return `count` generation types in seed-determined order.

    Raises
    ------
    ValueError
        If `count` is negative or larger than the template.
    """
    if count < 0 or count > MAX_SETS:
        raise ValueError(f"count must be between 0 and {MAX_SETS}, got {count}")
    types = list(TYPE_TEMPLATE[:max(count, MIN_TEMPLATE_SLICE)])[:count]
    return shuffle_in_place(types, rnd)
