"""httpx authentication and logging hooks."""
