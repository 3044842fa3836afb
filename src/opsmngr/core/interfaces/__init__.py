"""Protocols implemented by the transport and the resource services."""
