import math
import numpy as np


class AliasTableError(ValueError):
    """Base class for weights that cannot be turned into an alias table."""


class NegativeWeightError(AliasTableError):
    pass


class NonFiniteWeightError(AliasTableError):
    pass


class AllWeightsZeroError(AliasTableError):
    pass


class AliasTable:
    """Weighted random selection over a fixed set of items using Vose's
    Alias Method.

    Building the table takes O(n); every draw afterwards takes O(1) and
    consumes exactly two values from the random source passed to sample().
    The table never holds a generator of its own and is never modified
    after construction, so it can be shared between readers freely.

    See http://www.keithschwarz.com/darts-dice-coins/ for the algorithm.
    """
    def __init__(self, pairs):
        """
        Args:
            pairs (iterable of (item, float)): The items to select from and
                their weights. Weights need not sum to 1, they are
                normalized here. A weight of 0 is allowed and means the
                item is never selected.

        Raises:
            NegativeWeightError: if any weight is below zero.
            NonFiniteWeightError: if any weight is NaN or infinite.
            AllWeightsZeroError: if the weights sum to zero, which includes
                an empty input.
        """
        pairs = list(pairs)
        weights = [float(w) for _, w in pairs]

        for i, w in enumerate(weights):
            if w < 0.0:
                raise NegativeWeightError(
                    f"Weight of slot {i} is {w}; weights must not be negative."
                    )
            if not math.isfinite(w):
                raise NonFiniteWeightError(
                    f"Weight of slot {i} is {w}; weights must be finite."
                    )
        total = sum(weights)
        if total == 0.0:
            raise AllWeightsZeroError("Weights must not all be zero.")
        if not math.isfinite(total):
            raise NonFiniteWeightError(
                f"Weights sum to {total}; rescale them to a smaller range."
                )

        n = len(weights)
        # w / total rather than w * (1 / total): 1 / total overflows for
        # subnormal totals.
        prob = [w / total for w in weights]
        average = 1.0 / n

        # Scratch worklists, used as stacks.
        small, large = [], []
        for i, p in enumerate(prob):
            if p >= average:
                large.append(i)
            else:
                small.append(i)

        alias = [0] * n
        acceptance = [0.0] * n

        while small and large:
            less = small.pop()
            more = large.pop()
            acceptance[less] = _clamp_unit(prob[less] * n)
            alias[less] = more
            prob[more] = (prob[more] + prob[less]) - average
            if prob[more] >= average:
                large.append(more)
            else:
                small.append(more)

        # Rounding can leave residue in either list.
        for leftover in small + large:
            acceptance[leftover] = 1.0
            alias[leftover] = leftover

        self._items = tuple(item for item, _ in pairs)
        self._alias = tuple(alias)
        self._acceptance = tuple(acceptance)

    @property
    def items(self):
        return self._items

    @property
    def alias(self):
        return self._alias

    @property
    def acceptance(self):
        return self._acceptance

    def __len__(self):
        return len(self._items)

    def sample_index(self, rng):
        """Returns a random slot index; slot i comes up with probability
        proportional to the weight given for it at construction.

        Args:
            rng: A random source with randrange(start, stop) and random(),
                e.g. random.Random. Wrap a numpy.random.Generator once with
                random_sources.as_random_source() before drawing.
        """
        column = rng.randrange(0, len(self._acceptance))
        if rng.random() < self._acceptance[column]:
            return column
        return self._alias[column]

    def sample(self, rng):
        """Returns a random item, each with a chance proportional to its
        weight. See sample_index() for what rng must provide.
        """
        return self._items[self.sample_index(rng)]

    def implied_probabilities(self):
        """Returns the exact probability of drawing each slot as encoded by
        the acceptance and alias tables.

        Returns:
            np.ndarray: float64 array of length n that sums to 1 (up to
                rounding) and matches the normalized input weights.
        """
        n = len(self._acceptance)
        acceptance = np.asarray(self._acceptance, dtype=np.float64)
        implied = acceptance / n
        np.add.at(implied, np.asarray(self._alias, dtype=np.intp),
                  (1.0 - acceptance) / n)
        return implied

    def __repr__(self):
        return 'AliasTable(%r, %r)' % (
            list(zip(range(len(self._acceptance)),
                     self._acceptance, self._alias)),
            list(self._items))


def _clamp_unit(x):
    return min(max(x, 0.0), 1.0)
