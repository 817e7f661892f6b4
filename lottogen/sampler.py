"""
Weighted Sampling Without Replacement

Exponential-key method (Efraimidis-Spirakis): every item draws one uniform
``u`` from the stream and gets the key ``u ** (1 / w)``; the ``k`` largest
keys win. Heavier items tend to get keys closer to 1, and no item can be
picked twice.
"""

MIN_WEIGHT = 1e-9
MIN_UNIFORM = 1e-12


def weighted_sample(items, weights, k, rnd):
    """
    Pick up to `k` distinct items, favouring larger weights.

    Parameters
    ----------
    items : sequence
        Candidate items.
    weights : sequence of float
        One weight per item. Non-positive weights are clamped to 1e-9.
    k : int
        Number of items wanted. ``k >= len(items)`` returns every item
        (no padding); ``k <= 0`` returns an empty list.
    rnd : callable
        Stream returning floats in [0, 1). Called exactly once per item,
        in item order.

    Returns
    -------
    list of selected items, highest key first.
    """
    keyed = []
    for item, weight in zip(items, weights):
        w = max(MIN_WEIGHT, weight)
        u = max(MIN_UNIFORM, rnd())
        keyed.append((u ** (1.0 / w), item))

    # sorted() is stable, so equal keys keep item order
    keyed = sorted(keyed, key=lambda kv: kv[0], reverse=True)
    if k <= 0:
        return []
    return [item for _, item in keyed[:k]]
