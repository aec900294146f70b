"""Raster output: PPM buffer, palette and the grid-to-pixel canvas."""
