"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from exitum_gateway.infrastructure.clients.generation import GenerationClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_generation_client() -> GenerationClient:
    """Provide text generation API client instance"""
    return GenerationClient()
