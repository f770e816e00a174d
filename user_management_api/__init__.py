"""User management service package."""
