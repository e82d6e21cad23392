"""Infrastructure layer: persistence implementations of the application ports."""
