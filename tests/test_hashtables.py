import pytest

from dsalgo.hashtables import (
    ChainedHashTable,
    DoubleHashingTable,
    LinearProbingTable,
    QuadraticProbingTable,
    TableFullError,
    is_prime,
)

KEYS = [16, 12, 25, 39, 6, 122, 5, 68, 75]


@pytest.fixture
def chained():
    table = ChainedHashTable(10)
    for key in KEYS:
        table.insert(key)
    return table


def test_chained_search_found(chained):
    assert chained.search(6) == 6
    assert 6 in chained


def test_chained_search_missing(chained):
    assert chained.search(95) is None
    assert 95 not in chained


def test_chained_buckets_sorted_and_hashed(chained):
    stored = []
    for index in range(10):
        bucket = chained.bucket(index)
        assert list(bucket) == sorted(bucket)
        assert all(key % 10 == index for key in bucket)
        stored.extend(bucket)
    assert sorted(stored) == sorted(KEYS)


def test_chained_rejects_zero_buckets():
    with pytest.raises(ValueError):
        ChainedHashTable(0)


@pytest.mark.parametrize(
    "table_type", [LinearProbingTable, QuadraticProbingTable, DoubleHashingTable]
)
def test_every_inserted_value_is_found(table_type):
    table = table_type(20)
    values = [16, 12, 25, 39, 6, 122, 5, 68, 75, 36]
    for value in values:
        table.insert(value)
    for value in values:
        index = table.search(value)
        assert table.slots()[index] == value
    assert table.search(999) is None


def test_linear_collision_goes_to_next_slot():
    table = LinearProbingTable(10)
    table.insert(12)
    table.insert(22)
    assert table.search(22) == 3


def test_linear_full_table_raises():
    table = LinearProbingTable(3)
    for value in (1, 2, 3):
        table.insert(value)
    with pytest.raises(TableFullError):
        table.insert(4)


def test_linear_delete_empties_slot():
    table = LinearProbingTable(10)
    table.insert(7)
    table.delete(7)
    assert table.search(7) is None
    assert table.slots() == [None] * 10


def test_delete_missing_raises():
    table = QuadraticProbingTable(10)
    with pytest.raises(KeyError):
        table.delete(5)


def test_quadratic_probe_steps():
    table = QuadraticProbingTable(10)
    for value in (12, 22, 32):
        table.insert(value)
    assert table.search(32) == 6


def test_double_hashing_second_hash_stride():
    table = DoubleHashingTable(10)
    table.insert(3)
    table.insert(13)
    assert table.search(13) == 4


def test_double_hashing_needs_size_two():
    with pytest.raises(ValueError):
        DoubleHashingTable(1)


def test_zero_size_rejected():
    with pytest.raises(ValueError):
        LinearProbingTable(0)


@pytest.mark.parametrize("value,expected", [(2, True), (7, True), (1, False), (9, False)])
def test_is_prime(value, expected):
    assert is_prime(value) is expected