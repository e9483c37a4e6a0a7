"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from graphbook.dataset import Dataset, generate_dataset
from graphbook.graphql.context import GraphbookContext


@pytest.fixture
def dataset() -> Dataset:
    """A freshly generated dataset."""
    return generate_dataset()


@pytest.fixture
def graphql_context(dataset: Dataset) -> GraphbookContext:
    """Request context bound to user 1."""
    return GraphbookContext(viewer_id=1, dataset=dataset)


@pytest.fixture
def mock_info(graphql_context: GraphbookContext) -> MagicMock:
    """Create a mock GraphQL info object carrying the request context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = graphql_context
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
