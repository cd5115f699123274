from rustcraft.counter import Counter


def test_unseen_value_is_zero():
    counter = Counter()
    assert counter.times_seen(13) == 0


def test_counts_integers():
    counter = Counter()
    seen = [13, 14, 16, 14, 14, 11]
    for value in seen:
        counter.count(value)
    for value in range(10, 20):
        assert counter.times_seen(value) == seen.count(value)


def test_total_matches_number_counted():
    counter = Counter()
    seen = [13, 14, 16, 14, 14, 11]
    for value in seen:
        counter.count(value)
    assert sum(counter.times_seen(v) for v in set(seen)) == len(seen)


def test_counts_strings():
    counter = Counter()
    for fruit in ["apple", "orange", "apple"]:
        counter.count(fruit)
    assert counter.times_seen("apple") == 2
    assert counter.times_seen("orange") == 1
    assert counter.times_seen("pear") == 0


def test_counters_are_independent():
    first = Counter()
    second = Counter()
    first.count("x")
    assert first.times_seen("x") == 1
    assert second.times_seen("x") == 0