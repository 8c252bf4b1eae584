"""
Editor: block list state model and API client.
"""

from .client import BuilderClient, BuilderClientError
from .state import EditorBlock, EditorState

__all__ = ["BuilderClient", "BuilderClientError", "EditorBlock", "EditorState"]
