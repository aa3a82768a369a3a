import pytest
from fastapi.testclient import TestClient

from robot_api.main import app
from robot_api.models.item_model import Item
from robot_api.models.position_model import Position
from robot_api.models.robot_model import Robot
from robot_api.runtime_state import WorldStore, default_seed, get_world_store


@pytest.fixture
def store() -> WorldStore:
    """A fresh copy of the default world for every test."""
    return WorldStore.from_seed(default_seed())


@pytest.fixture
def client(store: WorldStore):
    app.dependency_overrides[get_world_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def robot() -> Robot:
    return Robot(id=1)


@pytest.fixture
def ground_item() -> Item:
    return Item(id=1, position=Position(x=2, y=3))
