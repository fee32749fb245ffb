"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from homeloan_gateway.infrastructure.clients.products import ProductClient
from homeloan_gateway.infrastructure.leads import LeadSink, LoggingLeadSink


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_product_client() -> ProductClient:
    """Provide product catalogue client instance"""
    return ProductClient()


def get_lead_sink() -> LeadSink:
    """Provide the sink that receives accepted leads"""
    return LoggingLeadSink()
