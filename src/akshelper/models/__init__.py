"""Pydantic models for cluster definitions and runtime configuration."""
