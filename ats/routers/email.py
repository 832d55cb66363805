"""Email template and invitation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ats.dependencies import get_email_service
from ats.models.email import (
    EmailBatch,
    EmailTemplate,
    EmailTemplateCreate,
    EmailTemplateUpdate,
    InvitationRequest,
)
from ats.models.result import ApiResult
from ats.routers.envelope import respond
from ats.services.invitations import EmailService

router = APIRouter()


@router.get("/templates", response_model=ApiResult[list[EmailTemplate]])
async def list_templates(
    response: Response,
    service: EmailService = Depends(get_email_service),
) -> ApiResult[list[EmailTemplate]]:
    return respond(await service.get_templates(), response)


@router.post("/templates", status_code=201, response_model=ApiResult[EmailTemplate])
async def create_template(
    payload: EmailTemplateCreate,
    response: Response,
    service: EmailService = Depends(get_email_service),
) -> ApiResult[EmailTemplate]:
    return respond(await service.create_template(payload), response)


@router.put("/templates/{template_id}", response_model=ApiResult[EmailTemplate])
async def update_template(
    template_id: str,
    payload: EmailTemplateUpdate,
    response: Response,
    service: EmailService = Depends(get_email_service),
) -> ApiResult[EmailTemplate]:
    return respond(await service.update_template(template_id, payload), response)


@router.get("/batches", response_model=ApiResult[list[EmailBatch]])
async def list_batches(
    response: Response,
    service: EmailService = Depends(get_email_service),
) -> ApiResult[list[EmailBatch]]:
    return respond(await service.get_batches(), response)


@router.post("/invitations", response_model=ApiResult[EmailBatch])
async def send_invitations(
    payload: InvitationRequest,
    response: Response,
    service: EmailService = Depends(get_email_service),
) -> ApiResult[EmailBatch]:
    """Render the template for each candidate and send it via n8n.

    Runs synchronously and returns the completed batch record.
    """
    return respond(
        await service.send_invitations(
            payload.candidate_ids, payload.template_id, payload.created_by
        ),
        response,
    )
