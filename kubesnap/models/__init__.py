"""Pydantic models for kubesnap."""
