"""Shared test fixtures."""

from __future__ import annotations

import pytest

# Text covering every UTF-8 sequence length and the boundaries between them.
_SAMPLE_TEXTS: list[str] = [
    "",
    "Hello world",
    "Héllo wörld café",
    "这是中文测试文本",
    "これはテストです。",
    "Hello 🌍🌎🌏",
    "\x00\x7f\x80\u07ff\u0800\ud7ff\ue000\uffff\U00010000\U0010ffff",
    "mixed: a é € 𐍈 b",
    "€" * 100 + "a",
    "𝄞" * 3,
]


@pytest.fixture(params=_SAMPLE_TEXTS, ids=repr)
def sample_text(request: pytest.FixtureRequest) -> str:
    """A surrogate-free string; every case encodes cleanly as UTF-8."""
    return request.param
