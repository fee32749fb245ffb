"""POST /v1/contact - lead submission from the contact form"""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from homeloan_gateway.api.dependencies import get_lead_sink, get_request_id
from homeloan_gateway.domain.leads import validate_lead
from homeloan_gateway.domain.exceptions import LeadValidationError
from homeloan_gateway.infrastructure.leads import LeadSink
from homeloan_gateway.infrastructure.observability.metrics import record_lead

router = APIRouter()


def _iso_timestamp(lead_time) -> str:
    """UTC instant with millisecond precision and Z suffix"""
    return lead_time.strftime("%Y-%m-%dT%H:%M:%S.") + f"{lead_time.microsecond // 1000:03d}Z"


@router.post("/contact")
async def submit_contact(request: Request, lead_sink: LeadSink = Depends(get_lead_sink)):
    """
    Accept a lead from the contact form.

    Responses:
    - 200 {status: success, message: Lead received, data: {name, email, timestamp}}
    - 400 {status: error, message} for missing fields, bad email, or bad phone
    - 500 {status: error, message: Internal server error} otherwise
    """
    request_id = get_request_id(request)

    try:
        payload = await request.json()
        lead = validate_lead(payload)
        lead_sink.record(lead, request_id)

    except LeadValidationError as e:
        record_lead("rejected")
        logging.info(f"Lead rejected: {e}", extra={"request_id": request_id})
        return JSONResponse(status_code=400, content={"status": "error", "message": str(e)})

    except Exception as e:
        record_lead("error")
        logging.error(f"Error processing contact request: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Internal server error"},
        )

    record_lead("accepted")
    return JSONResponse(
        status_code=200,
        content={
            "status": "success",
            "message": "Lead received",
            "data": {
                "name": lead.name,
                "email": lead.email,
                "timestamp": _iso_timestamp(lead.received_at),
            },
        },
    )
