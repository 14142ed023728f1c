"""Pytest configuration for path setup.

The client package lives under ``client/src`` and the test helpers under
``tests/helpers``.  When pytest is executed without installing the
project, neither location is on ``sys.path``.  This file ensures that the
project root (for ``tests.helpers`` and ``scripts``) and ``client/src``
(for ``coinbase_pro``) are importable during test collection.
"""

from __future__ import annotations

import base64
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

for path in (ROOT, ROOT / "client" / "src"):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from tests.helpers.fake_session import FakeSession  # noqa: E402

TEST_KEY_BYTES = b"coinbase-test-secret-key-0123456"
TEST_SECRET = base64.b64encode(TEST_KEY_BYTES).decode()


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def test_secret() -> str:
    return TEST_SECRET


@pytest.fixture
def test_key_bytes() -> bytes:
    return TEST_KEY_BYTES
