"""Pydantic models for host payloads and tab state."""
