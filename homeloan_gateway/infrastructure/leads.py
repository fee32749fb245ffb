"""Lead sinks - where accepted contact form submissions go"""

from typing import List, Protocol

from homeloan_gateway.domain.models import Lead
from homeloan_gateway.infrastructure.observability.logging import log_lead


class LeadSink(Protocol):
    """Receives each validated lead"""

    def record(self, lead: Lead, request_id: str) -> None:
        ...


class LoggingLeadSink:
    """Emit each lead as a structured log event (no persistence)"""

    def record(self, lead: Lead, request_id: str) -> None:
        log_lead(
            request_id=request_id,
            name=lead.name,
            email=lead.email,
            received_at=lead.received_at.isoformat(),
        )


class InMemoryLeadSink:
    """Collect leads in a list, for tests and local development"""

    def __init__(self):
        self.leads: List[Lead] = []

    def record(self, lead: Lead, request_id: str) -> None:
        self.leads.append(lead)
