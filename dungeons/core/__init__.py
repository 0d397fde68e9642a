"""Core engine pieces shared by the dashboard and the renderers."""
