"""Presentation: camera framing, projection, scene and HUD rendering."""
