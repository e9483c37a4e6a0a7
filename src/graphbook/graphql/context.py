"""
Request-scoped GraphQL context
"""

import strawberry
from strawberry.fastapi import BaseContext

from ..config import settings
from ..dataset import Dataset, get_dataset


class GraphbookContext(BaseContext):
    """Context handed to every resolver of a single request."""

    def __init__(self, viewer_id: int, dataset: Dataset):
        super().__init__()
        self.viewer_id = viewer_id
        self.dataset = dataset


def build_context() -> GraphbookContext:
    """Build the context for a new request."""
    return GraphbookContext(viewer_id=settings.viewer_user_id, dataset=get_dataset())


def get_context_from_info(info: strawberry.Info) -> GraphbookContext:
    return info.context
