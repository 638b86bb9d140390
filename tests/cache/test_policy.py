import pytest
from cachesim.cache.policy import ReplacementPolicy


def test_refresh_on_hit():
    assert ReplacementPolicy.LRU.refresh_on_hit is True
    assert ReplacementPolicy.FIFO.refresh_on_hit is False


@pytest.mark.parametrize("name, expected", [
    ("FIFO", ReplacementPolicy.FIFO),
    ("lru", ReplacementPolicy.LRU),
    (ReplacementPolicy.LRU, ReplacementPolicy.LRU),
])
def test_parse(name, expected):
    assert ReplacementPolicy.parse(name) is expected


def test_parse_unknown_policy():
    with pytest.raises(ValueError, match="FIFO or LRU"):
        ReplacementPolicy.parse("RANDOM")
