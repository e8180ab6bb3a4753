"""Infrastructure layer - environment-driven configuration."""
