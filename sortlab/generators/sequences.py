import random
from typing import Callable, Dict, List, Optional


def random_sequence(n: int, rng: Optional[random.Random] = None, upper: int = 10000) -> List[int]:
    """``n`` uniform random ints in ``[0, upper)``."""
    rng = rng or random.Random()
    return [rng.randrange(upper) for _ in range(n)]


def increasing_sequence(n: int, rng: Optional[random.Random] = None) -> List[int]:
    return list(range(n))


def decreasing_sequence(n: int, rng: Optional[random.Random] = None) -> List[int]:
    return list(range(n - 1, -1, -1))


def equal_sequence(n: int, rng: Optional[random.Random] = None, value: int = 42) -> List[int]:
    return [value] * n


def last_out_of_order(n: int, rng: Optional[random.Random] = None) -> List[int]:
    """``n - 1`` equal values followed by a smaller one."""
    seq = [42] * n
    if seq:
        seq[-1] = 41
    return seq


def first_out_of_order(n: int, rng: Optional[random.Random] = None) -> List[int]:
    """A large value followed by ``n - 1`` equal smaller ones."""
    seq = [42] * n
    if seq:
        seq[0] = 43
    return seq


def few_unique_sequence(n: int, rng: Optional[random.Random] = None, distinct: int = 4) -> List[int]:
    # Many duplicate keys: the input that separates two-way from three-way quicksort
    rng = rng or random.Random()
    return [rng.randrange(distinct) for _ in range(n)]


SEQUENCE_GENERATORS: Dict[str, Callable[..., List[int]]] = {
    "random": random_sequence,
    "increasing": increasing_sequence,
    "decreasing": decreasing_sequence,
    "equal": equal_sequence,
    "last_out_of_order": last_out_of_order,
    "first_out_of_order": first_out_of_order,
    "few_unique": few_unique_sequence,
}


def generate(name: str, n: int, seed: Optional[int] = None) -> List[int]:
    """Build an input of category ``name``; ``seed`` makes random categories repeatable."""
    if name not in SEQUENCE_GENERATORS:
        raise ValueError(f"Unknown sequence category {name!r} "
                         f"(available: {', '.join(SEQUENCE_GENERATORS)})")
    return SEQUENCE_GENERATORS[name](n, random.Random(seed))
