"""
Set Summary Statistics

Descriptive numbers shown next to each generated set. Purely informational;
nothing here feeds back into generation.
"""
from lottogen.generator import BANDS


def band_of(n):
    """Index (0-4) of the 1-10/11-20/21-30/31-40/41-45 band holding `n`."""
    for i, (lo, hi) in enumerate(BANDS):
        if lo <= n <= hi:
            return i
    raise ValueError(f"number out of range: {n}")


def band_label(i):
    lo, hi = BANDS[i]
    return f"{lo}-{hi}"


def set_stats(numbers):
    """Calculate summary stats for a set."""
    sorted_nums = sorted(numbers)
    odd = sum(1 for n in numbers if n % 2 == 1)
    even = len(numbers) - odd

    bands = {}
    for n in numbers:
        label = band_label(band_of(n))
        bands[label] = bands.get(label, 0) + 1

    return {
        "numbers": sorted_nums,
        "sum": sum(numbers),
        "odd_even": f"{odd}/{even}",
        "band_spread": bands,
        "band_count": len(bands),
    }
