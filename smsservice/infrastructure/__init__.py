"""Infrastructure layer - TLS trust and gateway transport."""
