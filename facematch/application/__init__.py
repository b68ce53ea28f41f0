"""Application layer: session orchestration and API data transfer objects."""
