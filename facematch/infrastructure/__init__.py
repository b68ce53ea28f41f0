"""Infrastructure layer: camera access and HTTP clients for the remote services."""
