"""FastAPI routes for the Back office domain — contact messages and testimonials."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from backoffice.api.schemas import (
    CreateTestimonialRequest,
    MessageIdResponse,
    MessageStatusRequest,
    StatusResponse,
    SubmitMessageRequest,
    TestimonialIdResponse,
    UpdateTestimonialRequest,
)
from backoffice.message.management import DeleteContactMessage, SubmitContactMessage, UpdateMessageStatus
from backoffice.message.message import ContactMessage
from backoffice.testimonial.management import (
    ActivateTestimonial,
    CreateTestimonial,
    DeactivateTestimonial,
    DeleteTestimonial,
    UpdateTestimonial,
)
from backoffice.testimonial.testimonial import Testimonial


def _message_view(message) -> dict:
    return {
        "message_id": str(message.id),
        "name": message.name,
        "email": message.email,
        "phone": message.phone,
        "message": message.message,
        "status": message.status,
        "created_at": message.created_at,
    }


def _testimonial_view(testimonial) -> dict:
    return {
        "testimonial_id": str(testimonial.id),
        "name": testimonial.name,
        "location": testimonial.location,
        "text": testimonial.text,
        "rating": testimonial.rating,
        "avatar_url": testimonial.avatar_url,
        "is_verified": testimonial.is_verified,
        "is_active": testimonial.is_active,
    }


# ---------------------------------------------------------------------------
# Message Router
# ---------------------------------------------------------------------------
message_router = APIRouter(prefix="/messages", tags=["messages"])


@message_router.post("", status_code=201, response_model=MessageIdResponse)
async def submit_message(body: SubmitMessageRequest) -> MessageIdResponse:
    message_id = current_domain.process(SubmitContactMessage(**body.model_dump()), asynchronous=False)
    return MessageIdResponse(message_id=message_id)


@message_router.get("")
async def list_messages(status: str | None = None) -> list[dict]:
    query = current_domain.repository_for(ContactMessage)._dao.query
    if status:
        query = query.filter(status=status)
    messages = sorted(query.all().items, key=lambda m: m.created_at, reverse=True)
    return [_message_view(m) for m in messages]


@message_router.put("/{message_id}/status", response_model=StatusResponse)
async def update_message_status(message_id: str, body: MessageStatusRequest) -> StatusResponse:
    current_domain.process(UpdateMessageStatus(message_id=message_id, status=body.status), asynchronous=False)
    return StatusResponse()


@message_router.delete("/{message_id}", response_model=StatusResponse)
async def delete_message(message_id: str) -> StatusResponse:
    current_domain.process(DeleteContactMessage(message_id=message_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Testimonial Router
# ---------------------------------------------------------------------------
testimonial_router = APIRouter(prefix="/testimonials", tags=["testimonials"])


@testimonial_router.get("")
async def list_testimonials(include_inactive: bool = False) -> list[dict]:
    """Active testimonials for the site; admins pass ``include_inactive``."""
    query = current_domain.repository_for(Testimonial)._dao.query
    if not include_inactive:
        query = query.filter(is_active=True)
    testimonials = sorted(query.all().items, key=lambda t: t.created_at, reverse=True)
    return [_testimonial_view(t) for t in testimonials]


@testimonial_router.post("", status_code=201, response_model=TestimonialIdResponse)
async def create_testimonial(body: CreateTestimonialRequest) -> TestimonialIdResponse:
    testimonial_id = current_domain.process(CreateTestimonial(**body.model_dump()), asynchronous=False)
    return TestimonialIdResponse(testimonial_id=testimonial_id)


@testimonial_router.put("/{testimonial_id}", response_model=StatusResponse)
async def update_testimonial(testimonial_id: str, body: UpdateTestimonialRequest) -> StatusResponse:
    command = UpdateTestimonial(testimonial_id=testimonial_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@testimonial_router.put("/{testimonial_id}/activate", response_model=StatusResponse)
async def activate_testimonial(testimonial_id: str) -> StatusResponse:
    current_domain.process(ActivateTestimonial(testimonial_id=testimonial_id), asynchronous=False)
    return StatusResponse()


@testimonial_router.put("/{testimonial_id}/deactivate", response_model=StatusResponse)
async def deactivate_testimonial(testimonial_id: str) -> StatusResponse:
    current_domain.process(DeactivateTestimonial(testimonial_id=testimonial_id), asynchronous=False)
    return StatusResponse()


@testimonial_router.delete("/{testimonial_id}", response_model=StatusResponse)
async def delete_testimonial(testimonial_id: str) -> StatusResponse:
    current_domain.process(DeleteTestimonial(testimonial_id=testimonial_id), asynchronous=False)
    return StatusResponse()
