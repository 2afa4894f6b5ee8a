"""In-memory API key management service."""
