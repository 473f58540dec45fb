"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from datetime import date

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Product Schemas
# ---------------------------------------------------------------------------
class AddProductRequest(BaseModel):
    name: str
    size: str | None = None
    price: float = Field(ge=0)
    stock: int = Field(ge=0, default=0)
    description: str | None = None
    image_url: str | None = None
    is_active: bool = True

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Classic",
                    "size": "16 oz",
                    "price": 6.99,
                    "stock": 120,
                }
            ]
        }
    }


class UpdateProductDetailsRequest(BaseModel):
    name: str | None = None
    size: str | None = None
    description: str | None = None
    image_url: str | None = None


class ChangePriceRequest(BaseModel):
    new_price: float


class AdjustStockRequest(BaseModel):
    new_stock: int


class ProductIdResponse(BaseModel):
    product_id: str


# ---------------------------------------------------------------------------
# Order Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    items: dict[str, int] = Field(default_factory=dict, description="Quantity per product id")
    customer_name: str = ""
    customer_email: str | None = None
    customer_phone: str = ""
    delivery_type: str = "delivery"
    delivery_address: str | None = None
    preferred_date: date | None = None
    preferred_time: str | None = None
    frequency: str = "once"
    preferred_day: str | None = None
    week_of_month: int | None = Field(default=None, ge=1, le=4)
    order_number: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": {"prod-8oz": 2, "prod-16oz": 1},
                    "customer_name": "Ana Lopez",
                    "customer_email": "ana@example.com",
                    "customer_phone": "555-0100",
                    "delivery_type": "delivery",
                    "delivery_address": "12 Palm St",
                    "preferred_date": "2024-03-01",
                    "preferred_time": "15:30",
                    "frequency": "monthly",
                    "preferred_day": "monday",
                    "week_of_month": 2,
                }
            ]
        }
    }


class PlaceOrderResponse(BaseModel):
    order_id: str
    order_number: str
    confirmation: dict[str, str]


class TransitionOrderRequest(BaseModel):
    status: str


class ConfirmationResponse(BaseModel):
    sent: bool


# ---------------------------------------------------------------------------
# Subscription Schemas
# ---------------------------------------------------------------------------
class ResumeSubscriptionRequest(BaseModel):
    as_of: date | None = None


class RecordDeliveryRequest(BaseModel):
    delivered_on: date | None = None


class NextDeliveryResponse(BaseModel):
    next_delivery_date: date | None


# ---------------------------------------------------------------------------
# Settings Schemas
# ---------------------------------------------------------------------------
class OrderIntakeRequest(BaseModel):
    receive_orders: bool


class SettingsResponse(BaseModel):
    receive_orders: bool


class SiteContactRequest(BaseModel):
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    delivery_hours: str | None = None
    business_hours_monday_friday: str | None = None
    business_hours_saturday: str | None = None
    business_hours_sunday: str | None = None
    logo_url: str | None = None


class SiteContactResponse(BaseModel):
    phone: str
    email: str
    address: str
    delivery_hours: str
    business_hours_monday_friday: str
    business_hours_saturday: str
    business_hours_sunday: str
    logo_url: str


# ---------------------------------------------------------------------------
# Generic Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"
