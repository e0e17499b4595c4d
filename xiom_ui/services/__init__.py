"""Registry, resolution, materialization and install services."""
