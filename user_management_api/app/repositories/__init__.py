"""Storage access for domain entities."""
