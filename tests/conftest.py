"""Shared test configuration."""

import importlib.util
import os
import sys
from pathlib import Path

# Keep tests from writing log files
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.container import bootstrap_container  # noqa: E402
from repositories import InMemoryCategoryRepository, InMemoryTaskRepository  # noqa: E402
from services import CategoryService, TaskService  # noqa: E402

from .fakes import FakeClock  # noqa: E402


def _load_main_module():
    # Import cmd/api/main.py by path to avoid conflict with stdlib cmd
    file_path = project_root / "cmd" / "api" / "main.py"
    spec = importlib.util.spec_from_file_location("cleantasks_api_main", file_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules["cleantasks_api_main"] = module
    spec.loader.exec_module(module)
    return module


main_module = _load_main_module()


@pytest.fixture
def task_repository():
    return InMemoryTaskRepository()


@pytest.fixture
def category_repository():
    return InMemoryCategoryRepository()


@pytest.fixture
def category_service(category_repository):
    return CategoryService(category_repository)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def task_service(task_repository, category_repository, clock):
    return TaskService(task_repository, category_repository, clock=clock)


@pytest.fixture
def container():
    return bootstrap_container()


@pytest.fixture
def client(container):
    app = main_module.create_app(container)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_app():
    return main_module.create_app
