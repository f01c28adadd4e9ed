"""Application layer: ports, DTOs, services and queries."""
