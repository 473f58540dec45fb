"""Testimonials — commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from backoffice.domain import backoffice
from backoffice.testimonial.testimonial import Testimonial


@backoffice.command(part_of="Testimonial")
class CreateTestimonial:
    name = String(required=True, max_length=100)
    location = String(max_length=100)
    text = Text(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    avatar_url = String(max_length=500)
    is_verified = Boolean(default=False)
    is_active = Boolean(default=True)


@backoffice.command(part_of="Testimonial")
class UpdateTestimonial:
    testimonial_id = Identifier(required=True)
    name = String(max_length=100)
    location = String(max_length=100)
    text = Text()
    rating = Integer(min_value=1, max_value=5)
    avatar_url = String(max_length=500)
    is_verified = Boolean()


@backoffice.command(part_of="Testimonial")
class ActivateTestimonial:
    testimonial_id = Identifier(required=True)


@backoffice.command(part_of="Testimonial")
class DeactivateTestimonial:
    testimonial_id = Identifier(required=True)


@backoffice.command(part_of="Testimonial")
class DeleteTestimonial:
    testimonial_id = Identifier(required=True)


@backoffice.command_handler(part_of=Testimonial)
class TestimonialHandler:
    @handle(CreateTestimonial)
    def create(self, command):
        testimonial = Testimonial.create(
            name=command.name,
            text=command.text,
            rating=command.rating,
            location=command.location,
            avatar_url=command.avatar_url,
            is_verified=bool(command.is_verified),
            is_active=command.is_active if command.is_active is not None else True,
        )
        current_domain.repository_for(Testimonial).add(testimonial)
        return str(testimonial.id)

    @handle(UpdateTestimonial)
    def update(self, command):
        repo = current_domain.repository_for(Testimonial)
        testimonial = repo.get(command.testimonial_id)
        testimonial.update(
            name=command.name,
            location=command.location,
            text=command.text,
            rating=command.rating,
            avatar_url=command.avatar_url,
            is_verified=command.is_verified,
        )
        repo.add(testimonial)

    @handle(ActivateTestimonial)
    def activate(self, command):
        repo = current_domain.repository_for(Testimonial)
        testimonial = repo.get(command.testimonial_id)
        testimonial.activate()
        repo.add(testimonial)

    @handle(DeactivateTestimonial)
    def deactivate(self, command):
        repo = current_domain.repository_for(Testimonial)
        testimonial = repo.get(command.testimonial_id)
        testimonial.deactivate()
        repo.add(testimonial)

    @handle(DeleteTestimonial)
    def delete(self, command):
        repo = current_domain.repository_for(Testimonial)
        repo._dao.delete(repo.get(command.testimonial_id))
