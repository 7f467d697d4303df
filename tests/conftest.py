from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest

from sqltrace.observability import TraceConfig

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def stream() -> StringIO:
    return StringIO()


@pytest.fixture
def plain_config() -> TraceConfig:
    """Config without slot highlighting, so buffered lines carry no markup."""
    return TraceConfig(highlight_slots=False)
