# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text output, including the total energy readout.
    - NullRenderer: No-op renderer for headless runs.
    - BufferedRenderer: Records frames for playback or analysis.

Typical usage:
    from charge_sim.renderer import DebugRenderer

    DebugRenderer().render_simulation(sim)
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
