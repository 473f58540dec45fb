import json

import pytest
from backoffice.testimonial import events as testimonial_events
from backoffice.testimonial import testimonial as testimonials
from protean.exceptions import ValidationError


def _create(**overrides):
    values = {"name": "Ben Ortiz", "text": "Always on time.", "rating": 5, "location": "Bayview"}
    values.update(overrides)
    return testimonials.Testimonial.create(**values)


class TestTestimonialCreation:
    def test_defaults(self):
        testimonial = _create()
        assert testimonial.is_active is True
        assert testimonial.is_verified is False

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            _create(rating=rating)


class TestTestimonialEdits:
    def test_update_ignores_missing_values(self):
        testimonial = _create()
        testimonial.update(text="Great water, friendly drivers.", location=None)
        assert testimonial.text == "Great water, friendly drivers."
        assert testimonial.location == "Bayview"

    def test_update_validates_rating(self):
        testimonial = _create()
        with pytest.raises(ValidationError):
            testimonial.update(rating=9)

    def test_deactivate_and_activate(self):
        testimonial = _create()
        testimonial.deactivate()
        assert testimonial.is_active is False
        testimonial.activate()
        assert testimonial.is_active is True

    def test_double_deactivate(self):
        testimonial = _create(is_active=False)
        with pytest.raises(ValidationError):
            testimonial.deactivate()

    def test_double_activate(self):
        with pytest.raises(ValidationError):
            _create().activate()


class TestTestimonialEvents:
    def test_creation_raises_added(self):
        testimonial = _create()
        event = testimonial._events[0]
        assert isinstance(event, testimonial_events.TestimonialAdded)
        assert event.rating == 5

    def test_edit_lists_changed_fields(self):
        testimonial = _create()
        testimonial._events.clear()

        testimonial.update(text="Great water, friendly drivers.", name="Ben Ortiz")

        event = testimonial._events[0]
        assert isinstance(event, testimonial_events.TestimonialEdited)
        assert json.loads(event.changed_fields) == ["text"]

    def test_edit_without_changes_raises_nothing(self):
        testimonial = _create()
        testimonial._events.clear()
        testimonial.update(rating=5, location=None)
        assert testimonial._events == []

    def test_visibility_events(self):
        testimonial = _create()
        testimonial._events.clear()

        testimonial.deactivate()
        testimonial.activate()

        assert [type(e) for e in testimonial._events] == [
            testimonial_events.TestimonialHidden,
            testimonial_events.TestimonialShown,
        ]
