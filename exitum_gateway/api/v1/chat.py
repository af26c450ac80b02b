"""POST /v1/chat - AI assistant reply with lead capture"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from exitum_gateway.api.v1.schemas import ChatRequest, ChatResponse
from exitum_gateway.api.dependencies import get_generation_client, get_request_id
from exitum_gateway.domain.models import ChatReply, LeadSource
from exitum_gateway.domain.knowledge import build_context_block, lookup_context
from exitum_gateway.domain.prompts import (
    CHAT_LEAD_NAME,
    FALLBACK_EMPTY_REPLY,
    FALLBACK_ERROR_REPLY,
    build_system_instruction,
    chat_lead_issue,
)
from exitum_gateway.domain.exceptions import GenerationAPIError
from exitum_gateway.infrastructure.clients.generation import GenerationClient
from exitum_gateway.infrastructure.database.session import get_db
from exitum_gateway.infrastructure.database.repositories import LeadRepository
from exitum_gateway.infrastructure.observability.metrics import chat_reply_counter, lead_counter
from exitum_gateway.infrastructure.observability.logging import log_chat
from exitum_gateway.utils.phone_utils import extract_phone

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request_body: ChatRequest,
    request: Request,
    db: Session = Depends(get_db),
    generation_client: GenerationClient = Depends(get_generation_client),
):
    """
    Answer a visitor's message. Errors never reach the visitor: any failure
    is logged and answered with canned text.

    Flow:
    1. Capture a lead if the message contains a phone number
    2. Select knowledge snippets by keyword
    3. Build the system instruction with that context
    4. Call the generation API
    5. Fall back to canned text if anything fails or generation returns nothing
    """
    start_time = time.time()
    request_id = get_request_id(request)
    message = request_body.message
    result = ChatReply(reply=FALLBACK_ERROR_REPLY)
    outcome = "fallback"

    try:
        # 1. Lead capture
        phone = extract_phone(message)
        if phone:
            db_lead = LeadRepository(db).create_lead(
                name=CHAT_LEAD_NAME,
                phone=phone,
                issue=chat_lead_issue(message),
                source=LeadSource.CHAT,
            )
            db.commit()
            lead_counter.labels(source=LeadSource.CHAT.value).inc()
            result.lead_captured = True
            result.lead_id = str(db_lead.id)

        # 2-3. Context and instruction
        snippets = lookup_context(message)
        result.context_topics = [snippet.topic for snippet in snippets]
        system_instruction = build_system_instruction(build_context_block(snippets))

        # 4-5. Generation
        text = await generation_client.generate_reply(message, system_instruction)
        outcome = "generated" if text else "empty"
        result.reply = text or FALLBACK_EMPTY_REPLY

    except GenerationAPIError as e:
        logging.error(f"Generation API error: {e}", extra={"request_id": request_id})

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error in chat: {e}", extra={"request_id": request_id})

    duration_ms = (time.time() - start_time) * 1000
    chat_reply_counter.labels(outcome=outcome).inc()
    log_chat(request_id, outcome, result.lead_captured, result.context_topics, duration_ms)

    return ChatResponse(
        reply=result.reply,
        lead_captured=result.lead_captured,
        lead_id=result.lead_id,
        context_topics=result.context_topics,
    )
