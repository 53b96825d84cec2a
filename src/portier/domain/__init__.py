"""Domain layer: framework-free user model and business rules."""
