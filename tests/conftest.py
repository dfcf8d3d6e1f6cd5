import os
import sys

import pytest

# Add src/ to the Python path so the tests run without an editable install
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
)

from crypto_multihash import config


@pytest.fixture
def small_chunks(monkeypatch):
    """Force streaming readers to use tiny chunks."""
    monkeypatch.setattr(config, "STREAM_CHUNK_SIZE", 3)
    return 3
