from typing import Iterable

import numpy as np
from tqdm import tqdm

from minkowski.metrics.lp import (l1_distance, l2_distance, linf_distance,
                                  lp_distance)


def lp_profile(x, y, ps: Iterable[float], progress_bar: bool = False):
    """the lp distance between x and y for every p in ps"""
    if progress_bar:
        ps = tqdm(ps)
    return [(p, lp_distance(p, x, y)) for p in ps]


def compare_lp_distances(dim: int = 5, seed: int = 0):
    rng = np.random.default_rng(seed)
    x, y = rng.normal(size=(2, dim))
    print(f"l1   = {l1_distance(x, y):.6f}")
    print(f"l2   = {l2_distance(x, y):.6f}")
    for p, d in lp_profile(x, y, [1, 1.5, 2, 3, 5, 10, 20, 50, 100]):
        print(f"l{p:<3} = {d:.6f}")
    print(f"linf = {linf_distance(x, y):.6f}")


if __name__ == "__main__":
    compare_lp_distances()
