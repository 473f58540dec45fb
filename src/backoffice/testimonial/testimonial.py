"""Testimonial aggregate — a customer review shown on the site."""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Integer, String, Text

from backoffice.domain import backoffice
from backoffice.testimonial.events import TestimonialAdded, TestimonialEdited, TestimonialHidden, TestimonialShown

_EDITABLE_FIELDS = ("name", "location", "text", "rating", "avatar_url", "is_verified")


@backoffice.aggregate
class Testimonial:
    name = String(required=True, max_length=100)
    location = String(max_length=100)
    text = Text(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    avatar_url = String(max_length=500)
    is_verified = Boolean(default=False)
    is_active = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, name, text, rating, location=None, avatar_url=None, is_verified=False, is_active=True):
        now = datetime.now(UTC)
        testimonial = cls(
            name=name,
            text=text,
            rating=rating,
            location=location,
            avatar_url=avatar_url,
            is_verified=is_verified,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
        testimonial.raise_(
            TestimonialAdded(
                testimonial_id=str(testimonial.id),
                name=testimonial.name,
                rating=testimonial.rating,
                is_active=testimonial.is_active,
                added_at=now,
            )
        )
        return testimonial

    def update(self, **changes):
        """Apply edits from the admin form. ``None`` values are ignored."""
        changed = []
        for field in _EDITABLE_FIELDS:
            value = changes.get(field)
            if value is not None and value != getattr(self, field):
                setattr(self, field, value)
                changed.append(field)

        if not changed:
            return

        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(TestimonialEdited(testimonial_id=str(self.id), changed_fields=json.dumps(changed), edited_at=now))

    def activate(self):
        if self.is_active:
            raise ValidationError({"is_active": ["Testimonial is already active"]})
        now = datetime.now(UTC)
        self.is_active = True
        self.updated_at = now
        self.raise_(TestimonialShown(testimonial_id=str(self.id), shown_at=now))

    def deactivate(self):
        if not self.is_active:
            raise ValidationError({"is_active": ["Testimonial is already inactive"]})
        now = datetime.now(UTC)
        self.is_active = False
        self.updated_at = now
        self.raise_(TestimonialHidden(testimonial_id=str(self.id), hidden_at=now))
