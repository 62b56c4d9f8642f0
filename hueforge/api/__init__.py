"""HueForge HTTP API routers."""
