"""Pydantic models mirroring Ops Manager JSON documents."""
