"""Render session package."""
from gofr_view.sessions.session import (
    MAX_RENDER_DEPTH,
    HeadElements,
    RenderSession,
    SessionState,
)

__all__ = ["MAX_RENDER_DEPTH", "HeadElements", "RenderSession", "SessionState"]
