"""Core configuration and HTTP transport."""
