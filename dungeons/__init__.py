"""DUNGEONS terminal dashboard.

Packages:
- core: geometry, layout engine, frame buffer, input model, renderer base
- dashboard: grid model, panels, input dispatch and the tick-driven loop
- renderers: terminal and headless display surfaces
"""

__version__ = "0.1.0"
