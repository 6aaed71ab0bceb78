"""Infrastructure: HTTP API access and preference storage."""
