"""HueForge palette and theme services."""
