import numpy as np


class NumpyRandomSource:
    """Exposes a numpy Generator through the randrange()/random() interface
    of random.Random, which is what AliasTable.sample expects.
    """
    def __init__(self, generator=None, seed=None):
        """
        Args:
            generator (np.random.Generator): Generator to draw from. If None,
                a new one is created with np.random.default_rng(seed).
            seed (int): Only used when generator is None.
        """
        if generator is None:
            generator = np.random.default_rng(seed)
        self.generator = generator

    def randrange(self, start, stop=None):
        if stop is None:
            start, stop = 0, start
        if stop <= start:
            raise ValueError(
                f"Empty range for randrange({start}, {stop})."
                )
        return int(self.generator.integers(start, stop))

    def random(self):
        return float(self.generator.random())


def as_random_source(rng):
    """Returns something with randrange() and random() for rng.

    random.Random instances (and anything shaped like them) are returned
    unchanged, numpy Generators are wrapped in a NumpyRandomSource.
    """
    if isinstance(rng, np.random.Generator):
        return NumpyRandomSource(rng)
    if callable(getattr(rng, "randrange", None)) \
            and callable(getattr(rng, "random", None)):
        return rng
    raise TypeError(
        f"Expected a random source with randrange() and random(), "
        f"got {type(rng).__name__}."
        )
