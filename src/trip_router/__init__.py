"""Trip route planning and transport estimation service."""
