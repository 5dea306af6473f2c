"""
GraphQL request context.
"""

from fastapi import Request
from strawberry.fastapi import BaseContext
from strawberry.types import Info as _Info

from storefront.core.container import DependencyContainer
from storefront.core.domain import Viewer


class GraphQLContext(BaseContext):
    """Per-request context: the composition root and the resolved caller (if any)."""

    def __init__(self, container: DependencyContainer, viewer: Viewer | None = None):
        super().__init__()
        self.container = container
        self.viewer = viewer


Info = _Info[GraphQLContext, None]


async def get_context(request: Request) -> GraphQLContext:
    return GraphQLContext(
        container=request.app.state.container,
        viewer=getattr(request.state, "viewer", None),
    )
