"""Bootstrap wiring between the api layer and infrastructure."""
