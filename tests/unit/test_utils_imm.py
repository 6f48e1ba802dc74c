import pytest
from src.aarch64_hints.utils import parse_immediate

@pytest.mark.parametrize("text, expected", [
    ("#64", 64),
    ("#0", 0),
    ("#-100", -100),
    ("#0x40", 64),
    ("#0X40", 64),
    ("#-0x10", -16),
    ("#", None),
    ("64", None),
    ("#SYS_write", None),
    ("#1.5", None),
    ("=buffer", None),
])
def test_parse_immediate(text, expected):
    assert parse_immediate(text) == expected
