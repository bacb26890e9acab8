"""Application layer: use cases, validators, DTOs and ports."""
