# MIT License (see LICENSE)
"""
Rendering adapters.

    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer.
    - BufferedRenderer: Records frames for playback or export.

The engine has no rendering dependency; these adapters are optional.
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
