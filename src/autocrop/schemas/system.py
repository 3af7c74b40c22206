"""
System-related API models.

This module contains models for system status:
- Health check
"""

from pydantic import BaseModel


class HealthStatus(BaseModel):
    """Health check result"""

    status: str
    version: str
    timestamp: str
