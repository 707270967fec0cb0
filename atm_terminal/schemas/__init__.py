"""Pydantic schemas for the terminal API and seed configuration."""
