"""FastAPI routes for the Ordering domain — products, orders, subscriptions, settings."""

import json
from datetime import date

from fastapi import APIRouter
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddProductRequest,
    AdjustStockRequest,
    ChangePriceRequest,
    ConfirmationResponse,
    NextDeliveryResponse,
    OrderIntakeRequest,
    PlaceOrderRequest,
    PlaceOrderResponse,
    ProductIdResponse,
    RecordDeliveryRequest,
    ResumeSubscriptionRequest,
    SettingsResponse,
    SiteContactRequest,
    SiteContactResponse,
    StatusResponse,
    TransitionOrderRequest,
    UpdateProductDetailsRequest,
)
from ordering.order.confirmation import SendOrderConfirmation, confirmation_query_params
from ordering.order.export import export_orders
from ordering.order.lifecycle import DeleteOrder, TransitionOrder
from ordering.order.order import Order, allowed_transitions
from ordering.order.placement import PlaceOrder
from ordering.product.management import (
    ActivateProduct,
    AddProduct,
    AdjustStock,
    ChangeProductPrice,
    DeactivateProduct,
    RemoveProduct,
    UpdateProductDetails,
)
from ordering.product.product import Product
from ordering.settings.management import SetOrderIntake, UpdateSiteContact
from ordering.settings.store_settings import StoreSettings
from ordering.subscription.management import (
    CancelSubscription,
    PauseSubscription,
    RecordSubscriptionDelivery,
    ResumeSubscription,
)
from ordering.subscription.schedule import frequency_label
from ordering.subscription.subscription import Subscription


# ---------------------------------------------------------------------------
# Read models
# ---------------------------------------------------------------------------
def _product_view(product) -> dict:
    return {
        "product_id": str(product.id),
        "name": product.name,
        "size": product.size,
        "price": product.price,
        "stock": product.stock,
        "is_active": product.is_active,
        "description": product.description,
        "image_url": product.image_url,
    }


def _order_view(order) -> dict:
    return {
        "order_id": str(order.id),
        "order_number": order.order_number,
        "customer_name": order.customer_name,
        "customer_email": order.customer_email,
        "customer_phone": order.customer_phone,
        "delivery_type": order.delivery_type,
        "delivery_address": order.delivery_address,
        "preferred_date": order.preferred_date,
        "preferred_time": order.preferred_time,
        "items": [item.to_dict() for item in order.items],
        "total_amount": order.total_amount,
        "status": order.status,
        "allowed_transitions": sorted(allowed_transitions(order.status)),
        "payment_method": order.payment_method,
        "is_subscription": order.is_subscription,
        "subscription_id": str(order.subscription_id) if order.subscription_id else None,
        "confirmation_sent": order.confirmation_sent,
        "created_at": order.created_at,
    }


def _subscription_view(subscription) -> dict:
    return {
        "subscription_id": str(subscription.id),
        "customer_name": subscription.customer_name,
        "customer_email": subscription.customer_email,
        "customer_phone": subscription.customer_phone,
        "delivery_type": subscription.delivery_type,
        "delivery_address": subscription.delivery_address,
        "frequency": subscription.frequency,
        "frequency_label": frequency_label(subscription.frequency),
        "schedule_summary": subscription.schedule_summary,
        "items": [item.to_dict() for item in subscription.items],
        "total_amount": subscription.total_amount,
        "status": subscription.status,
        "next_delivery_date": subscription.next_delivery_date,
        "last_delivery_date": subscription.last_delivery_date,
        "start_date": subscription.start_date,
    }


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("")
async def list_active_products() -> list[dict]:
    """Products offered to customers, cheapest first."""
    return [_product_view(p) for p in current_domain.repository_for(Product).active_products()]


@product_router.get("/all")
async def list_all_products() -> list[dict]:
    return [_product_view(p) for p in current_domain.repository_for(Product).all_products()]


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(**body.model_dump())
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("/{product_id}")
async def get_product(product_id: str) -> dict:
    return _product_view(current_domain.repository_for(Product).get(product_id))


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: UpdateProductDetailsRequest) -> StatusResponse:
    command = UpdateProductDetails(product_id=product_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/price", response_model=StatusResponse)
async def change_price(product_id: str, body: ChangePriceRequest) -> StatusResponse:
    current_domain.process(ChangeProductPrice(product_id=product_id, new_price=body.new_price), asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/stock", response_model=StatusResponse)
async def adjust_stock(product_id: str, body: AdjustStockRequest) -> StatusResponse:
    current_domain.process(AdjustStock(product_id=product_id, new_stock=body.new_stock), asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/activate", response_model=StatusResponse)
async def activate_product(product_id: str) -> StatusResponse:
    current_domain.process(ActivateProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/deactivate", response_model=StatusResponse)
async def deactivate_product(product_id: str) -> StatusResponse:
    current_domain.process(DeactivateProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=PlaceOrderResponse)
async def place_order(body: PlaceOrderRequest) -> PlaceOrderResponse:
    payload = body.model_dump()
    payload["items"] = json.dumps(payload["items"])
    order_id = current_domain.process(PlaceOrder(**payload), asynchronous=False)

    order = current_domain.repository_for(Order).get(order_id)
    subscription = None
    if order.subscription_id:
        subscription = current_domain.repository_for(Subscription).get(order.subscription_id)

    return PlaceOrderResponse(
        order_id=str(order.id),
        order_number=order.order_number,
        confirmation=confirmation_query_params(order, subscription),
    )


@order_router.get("")
async def list_orders(status: str | None = None, customer_email: str | None = None) -> list[dict]:
    repo = current_domain.repository_for(Order)
    return [_order_view(o) for o in repo.list_orders(status, customer_email=customer_email)]


@order_router.get("/export")
async def export(status: str | None = None, date_from: date | None = None, date_to: date | None = None) -> list[dict]:
    orders = current_domain.repository_for(Order).list_orders()
    return export_orders(orders, status=status, date_from=date_from, date_to=date_to)


@order_router.get("/{order_id}")
async def get_order(order_id: str) -> dict:
    return _order_view(current_domain.repository_for(Order).get(order_id))


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def transition_order(order_id: str, body: TransitionOrderRequest) -> StatusResponse:
    new_status = current_domain.process(
        TransitionOrder(order_id=order_id, new_status=body.status),
        asynchronous=False,
    )
    return StatusResponse(status=new_status)


@order_router.post("/{order_id}/confirmation", response_model=ConfirmationResponse)
async def send_confirmation(order_id: str) -> ConfirmationResponse:
    sent = current_domain.process(SendOrderConfirmation(order_id=order_id), asynchronous=False)
    return ConfirmationResponse(sent=sent)


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Subscription Router
# ---------------------------------------------------------------------------
subscription_router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


@subscription_router.get("")
async def list_subscriptions(status: str | None = None, customer_email: str | None = None) -> list[dict]:
    repo = current_domain.repository_for(Subscription)
    return [_subscription_view(s) for s in repo.list_subscriptions(status, customer_email=customer_email)]


@subscription_router.get("/{subscription_id}")
async def get_subscription(subscription_id: str) -> dict:
    return _subscription_view(current_domain.repository_for(Subscription).get(subscription_id))


@subscription_router.put("/{subscription_id}/pause", response_model=StatusResponse)
async def pause_subscription(subscription_id: str) -> StatusResponse:
    current_domain.process(PauseSubscription(subscription_id=subscription_id), asynchronous=False)
    return StatusResponse()


@subscription_router.put("/{subscription_id}/resume", response_model=NextDeliveryResponse)
async def resume_subscription(subscription_id: str, body: ResumeSubscriptionRequest) -> NextDeliveryResponse:
    next_date = current_domain.process(
        ResumeSubscription(subscription_id=subscription_id, as_of=body.as_of),
        asynchronous=False,
    )
    return NextDeliveryResponse(next_delivery_date=next_date)


@subscription_router.put("/{subscription_id}/cancel", response_model=StatusResponse)
async def cancel_subscription(subscription_id: str) -> StatusResponse:
    current_domain.process(CancelSubscription(subscription_id=subscription_id), asynchronous=False)
    return StatusResponse()


@subscription_router.post("/{subscription_id}/deliveries", response_model=NextDeliveryResponse)
async def record_delivery(subscription_id: str, body: RecordDeliveryRequest) -> NextDeliveryResponse:
    next_date = current_domain.process(
        RecordSubscriptionDelivery(subscription_id=subscription_id, delivered_on=body.delivered_on),
        asynchronous=False,
    )
    return NextDeliveryResponse(next_delivery_date=next_date)


# ---------------------------------------------------------------------------
# Settings Router
# ---------------------------------------------------------------------------
settings_router = APIRouter(prefix="/settings", tags=["settings"])


@settings_router.get("", response_model=SettingsResponse)
async def get_settings() -> SettingsResponse:
    settings = current_domain.repository_for(StoreSettings).current()
    return SettingsResponse(receive_orders=settings.receive_orders)


@settings_router.put("/order-intake", response_model=SettingsResponse)
async def set_order_intake(body: OrderIntakeRequest) -> SettingsResponse:
    receive_orders = current_domain.process(SetOrderIntake(receive_orders=body.receive_orders), asynchronous=False)
    return SettingsResponse(receive_orders=receive_orders)


@settings_router.get("/contact", response_model=SiteContactResponse)
async def get_site_contact() -> SiteContactResponse:
    settings = current_domain.repository_for(StoreSettings).current()
    return SiteContactResponse(**settings.contact_info())


@settings_router.put("/contact", response_model=SiteContactResponse)
async def update_site_contact(body: SiteContactRequest) -> SiteContactResponse:
    contact = current_domain.process(UpdateSiteContact(**body.model_dump()), asynchronous=False)
    return SiteContactResponse(**contact)
