"""Domain events for the Testimonial aggregate."""

from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from backoffice.domain import backoffice


@backoffice.event(part_of="Testimonial")
class TestimonialAdded:
    __version__ = 1

    testimonial_id = Identifier(required=True)
    name = String(required=True)
    rating = Integer(required=True)
    is_active = Boolean(required=True)
    added_at = DateTime(required=True)


@backoffice.event(part_of="Testimonial")
class TestimonialEdited:
    __version__ = 1

    testimonial_id = Identifier(required=True)
    changed_fields = Text(required=True)  # JSON list of field names
    edited_at = DateTime(required=True)


@backoffice.event(part_of="Testimonial")
class TestimonialShown:
    """The testimonial is visible on the public site again."""

    __version__ = 1

    testimonial_id = Identifier(required=True)
    shown_at = DateTime(required=True)


@backoffice.event(part_of="Testimonial")
class TestimonialHidden:
    __version__ = 1

    testimonial_id = Identifier(required=True)
    hidden_at = DateTime(required=True)
