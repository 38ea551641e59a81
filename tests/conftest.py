import pytest

from core.config import get_settings
from core.container import Container
from repositories import InMemoryTaskRepository
from services import TaskService


@pytest.fixture(autouse=True)
def fresh_state():
    """Reset cached settings and container registrations around each test."""
    get_settings.cache_clear()
    Container.clear()
    yield
    get_settings.cache_clear()
    Container.clear()


@pytest.fixture
def repository():
    return InMemoryTaskRepository()


@pytest.fixture
def service(repository):
    return TaskService(repository)
