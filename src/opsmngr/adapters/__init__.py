"""httpx-backed implementations: client construction, transport, services."""
