from __future__ import annotations

from typing import Callable

import pytest

from godecl.frontend import SourceFile, parse_source
from tests._fixtures.go_sources import go_source


@pytest.fixture
def load_source() -> Callable[[str], SourceFile]:
    """Parse an inline Go snippet into a SourceFile for extractor tests."""

    def _load(content: str) -> SourceFile:
        return parse_source(go_source(content).encode("utf-8"))

    return _load
