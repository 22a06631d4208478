"""Users REST API service."""
