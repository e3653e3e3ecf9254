from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from commandkit.arguments import MappingEntityLookup

ROLE_ID = 111
USER_ID = 222
CHANNEL_ID = 333


@dataclass
class FakeEntity:
    id: int
    name: str


@pytest.fixture()
def entities() -> dict[str, Any]:
    """Known role/user/channel objects keyed by kind."""
    return {
        "role": FakeEntity(ROLE_ID, "moderators"),
        "user": FakeEntity(USER_ID, "alice"),
        "channel": FakeEntity(CHANNEL_ID, "general"),
    }


@pytest.fixture()
def lookup(entities: dict[str, Any]) -> MappingEntityLookup:
    """Entity cache containing exactly one role, one user and one channel."""
    return MappingEntityLookup(
        roles={ROLE_ID: entities["role"]},
        users={USER_ID: entities["user"]},
        channels={CHANNEL_ID: entities["channel"]},
    )
