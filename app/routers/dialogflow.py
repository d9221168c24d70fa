"""
Dialogflow Router — Thin HTTP layer
===================================
Fulfillment webhook for the Dialogflow ES agent.
Delegates all business logic to WebhookOrchestrator and always answers 200.
"""

import logging

from fastapi import APIRouter, Depends, Request

from app.dependencies import get_orchestrator
from app.services.orchestrator_service import WebhookOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/dialogflow")
async def receive_dialogflow_webhook(
    request: Request,
    orchestrator: WebhookOrchestrator = Depends(get_orchestrator),
):
    """
    Receives one user turn, routes it by intent and returns the fulfillment payload.
    """
    try:
        raw_body = await request.json()
    except ValueError:
        logger.warning("Request body is not valid JSON")
        raw_body = None

    return await orchestrator.process(raw_body)
