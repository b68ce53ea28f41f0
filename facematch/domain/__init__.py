"""Pure domain layer: models, gateway interfaces and the failure taxonomy."""
