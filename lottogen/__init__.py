"""
Lotto 6/45 Frequency-Weighted Set Generator

Modules:
- rng: Mulberry32 seeded stream and fresh-seed supplier
- analysis: Draw frequency counts and high/mid/low tiers
- sampler: Weighted sampling without replacement (exponential keys)
- planner: Generation types and their seeded ordering
- generator: Builds the ordered list of 6-number sets
- stats: Descriptive stats for generated sets
- scraper: Fetches and stores historical draws
"""

from lottogen.generator import GeneratedSet, generate
from lottogen.planner import GenerationType

__all__ = [
    "GeneratedSet",
    "GenerationType",
    "generate",
]
