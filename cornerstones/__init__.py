"""Render a flat reference document as navigable, trackable pages."""
