from __future__ import annotations

import pytest

from projector_core.schemas import ProjectorData


@pytest.fixture
def sample_data() -> ProjectorData:
    return ProjectorData(
        projector={
            "/": {"baba": "baz1", "femto": "is_supreme_soy"},
            "/baba": {"baba": "baz2"},
            "/baba/baz": {"baba": "baz3"},
        }
    )
