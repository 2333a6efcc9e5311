from arraybag.utils.misc import sample_values, set_random_seed


def test_sample_values() -> None:
    values = sample_values(500, low=0, high=50)

    assert len(values) == 500
    assert all(isinstance(v, float) for v in values)
    assert all(0 <= v < 50 and v == int(v) for v in values)


def test_seed_makes_samples_reproducible() -> None:
    set_random_seed(7)
    first = sample_values(20)
    set_random_seed(7)
    assert sample_values(20) == first
