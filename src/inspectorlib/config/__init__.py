"""Inspector configuration."""
