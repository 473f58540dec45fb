"""Pydantic request/response schemas for the Back office API."""

from pydantic import BaseModel, Field


class SubmitMessageRequest(BaseModel):
    name: str
    email: str
    phone: str | None = None
    message: str


class MessageStatusRequest(BaseModel):
    status: str = Field(examples=["responded"])


class MessageIdResponse(BaseModel):
    message_id: str


class CreateTestimonialRequest(BaseModel):
    name: str
    location: str | None = None
    text: str
    rating: int = Field(ge=1, le=5)
    avatar_url: str | None = None
    is_verified: bool = False
    is_active: bool = True


class UpdateTestimonialRequest(BaseModel):
    name: str | None = None
    location: str | None = None
    text: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    avatar_url: str | None = None
    is_verified: bool | None = None


class TestimonialIdResponse(BaseModel):
    testimonial_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
