from random import Random

import numpy as np
import pytest

from random_sources import NumpyRandomSource, as_random_source


def test_randrange_stays_in_range():
    source = NumpyRandomSource(seed=0)
    values = [source.randrange(3, 7) for _ in range(500)]
    assert set(values) == {3, 4, 5, 6}
    assert all(isinstance(v, int) for v in values)


def test_randrange_single_argument():
    source = NumpyRandomSource(seed=1)
    assert all(0 <= source.randrange(4) < 4 for _ in range(100))


def test_randrange_rejects_empty_range():
    source = NumpyRandomSource(seed=2)
    with pytest.raises(ValueError):
        source.randrange(5, 5)
    with pytest.raises(ValueError):
        source.randrange(0)


def test_random_is_unit_interval_float():
    source = NumpyRandomSource(seed=3)
    values = [source.random() for _ in range(500)]
    assert all(isinstance(v, float) and 0.0 <= v < 1.0 for v in values)


def test_seeded_sources_repeat():
    a = NumpyRandomSource(seed=11)
    b = NumpyRandomSource(np.random.default_rng(11))
    assert [a.randrange(0, 100) for _ in range(20)] == \
        [b.randrange(0, 100) for _ in range(20)]


def test_as_random_source_passes_random_through():
    rng = Random(0)
    assert as_random_source(rng) is rng


def test_as_random_source_wraps_numpy_generator():
    gen = np.random.default_rng(0)
    source = as_random_source(gen)
    assert isinstance(source, NumpyRandomSource)
    assert source.generator is gen


def test_as_random_source_rejects_other_objects():
    with pytest.raises(TypeError):
        as_random_source(object())
