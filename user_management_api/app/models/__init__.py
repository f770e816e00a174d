"""Domain entities persisted by the repositories."""
