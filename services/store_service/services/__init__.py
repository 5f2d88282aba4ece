"""Store Service business logic package."""
