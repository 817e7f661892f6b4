"""
Number-Set Generation for Lotto 6/45

Turns draw history and a seed into an ordered list of 6-number sets. Each
set comes from a strategy-specific candidate pool sampled by frequency
weight; numbers already used in earlier sets of the same run are
down-weighted so the sets stay varied.
"""
from collections import Counter
from typing import List, NamedTuple

from lottogen.analysis import ALL_NUMBERS, build_tiers, compute_frequency, number_weight
from lottogen.planner import GenerationType, plan_types
from lottogen.rng import SeededStream
from lottogen.sampler import weighted_sample

SET_SIZE = 6
PENALTY_FACTOR = 0.35

# (low, high) inclusive; every band contributes at least one number
BANDS = [(1, 10), (11, 20), (21, 30), (31, 40), (41, 45)]


class GeneratedSet(NamedTuple):
    type: GenerationType
    numbers: List[int]


class GenerationContext:
    """
    State for one ``generate`` call: frequencies, tiers, the stream, and
    (when cross-set dedup is on) how often each number has been used.
    """

    def __init__(self, freq, tiers, rnd, cross_set_dedup=True):
        self.freq = freq
        self.tiers = tiers
        self.rnd = rnd
        self.used = Counter() if cross_set_dedup else None

    def penalty(self, n):
        if self.used is None:
            return 1.0
        return 1.0 / (1.0 + self.used[n] * PENALTY_FACTOR)

    def weight(self, n):
        return number_weight(self.freq, n) * self.penalty(n)

    def pick(self, pool, k):
        """Sample `k` numbers from `pool` with penalised frequency weights."""
        pool = list(pool)
        return weighted_sample(pool, [self.weight(n) for n in pool], k, self.rnd)

    def record(self, numbers):
        if self.used is not None:
            self.used.update(numbers)


# ── Pool strategies ─────────────────────────────────────────────────────

def _pick_high(ctx):
    return ctx.pick(ctx.tiers["top"], SET_SIZE)


def _pick_mid(ctx):
    return ctx.pick(ctx.tiers["mid"], SET_SIZE)


def _pick_low(ctx):
    return ctx.pick(ctx.tiers["low"], SET_SIZE)


def _pick_high_mid(ctx):
    return ctx.pick(ctx.tiers["top"] + ctx.tiers["mid"], SET_SIZE)


def _pick_mid_low(ctx):
    return ctx.pick(ctx.tiers["mid"] + ctx.tiers["low"], SET_SIZE)


def _pick_all(ctx):
    return ctx.pick(ALL_NUMBERS, SET_SIZE)


def _pick_range_balanced(ctx):
    """One number per band, plus a second from a band chosen by total count."""
    needs = [1] * len(BANDS)
    band_scores = [
        sum(number_weight(ctx.freq, n) for n in range(lo, hi + 1))
        for lo, hi in BANDS
    ]
    extra = weighted_sample(list(range(len(BANDS))), band_scores, 1, ctx.rnd)[0]
    needs[extra] += 1

    nums = []
    for (lo, hi), need in zip(BANDS, needs):
        nums.extend(ctx.pick(range(lo, hi + 1), need))
    return nums


POOL_STRATEGIES = {
    GenerationType.HIGH_FREQUENCY: _pick_high,
    GenerationType.MID_FREQUENCY: _pick_mid,
    GenerationType.LOW_FREQUENCY: _pick_low,
    GenerationType.HIGH_MID_MIX: _pick_high_mid,
    GenerationType.MID_LOW_MIX: _pick_mid_low,
    GenerationType.MIXED_WEIGHTED: _pick_all,
    GenerationType.RANGE_BALANCED: _pick_range_balanced,
}


# ── Set generation ──────────────────────────────────────────────────────

def make_set(gen_type, ctx):
    """Build one sorted 6-number set for `gen_type`, back-filling if short."""
    nums = sorted(set(POOL_STRATEGIES[gen_type](ctx)))

    if len(nums) < SET_SIZE:
        # Only excludes the current set; heavy reuse in earlier sets is
        # handled by the weights alone.
        held = set(nums)
        rest = [n for n in ALL_NUMBERS if n not in held]
        nums = sorted(nums + ctx.pick(rest, SET_SIZE - len(nums)))

    return nums


def generate(draws, count, seed, include_bonus=False, cross_set_dedup=True):
    """
    Generate `count` number sets from draw history.

    Parameters
    ----------
    draws : pd.DataFrame or list of dict
        Historical draws (may be empty; weights then become uniform).
    count : int
        Number of sets, 0-10.
    seed : int
        32-bit seed. The same inputs always produce the same output.
    include_bonus : bool
        Count bonus numbers in the frequency table.
    cross_set_dedup : bool
        Down-weight numbers already used by earlier sets in this call.

    Returns
    -------
    list of GeneratedSet(type, numbers)
    """
    freq = compute_frequency(draws, include_bonus)
    tiers = build_tiers(freq)
    rnd = SeededStream(seed)
    ctx = GenerationContext(freq, tiers, rnd, cross_set_dedup)

    # the shuffle consumes the stream before any sampling
    types = plan_types(count, rnd)

    results = []
    for gen_type in types:
        nums = make_set(gen_type, ctx)
        ctx.record(nums)
        results.append(GeneratedSet(gen_type, nums))
    return results
