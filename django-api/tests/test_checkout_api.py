"""Integration tests for the checkout endpoints.

The payment provider is replaced by an in-memory fake; event and
ticket-type records come from the database.
Run with: pytest tests/test_checkout_api.py -v
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from checkout.services import CheckoutService
from events.models import Event, TicketType

PAYMENT_INTENT_URL = "/api/checkout/payment-intent"
QUOTE_URL = "/api/checkout/quote"


@pytest.fixture
def checkout(monkeypatch, payment_provider):
    config = apps.get_app_config("checkout")
    service = CheckoutService(
        apps.get_app_config("events").event_store,
        config.coupon_store,
        payment_provider,
    )
    monkeypatch.setattr(config, "checkout_service", service)
    return service


@pytest.fixture
def event(make_user) -> Event:
    return Event.objects.create(name="Launch Party", created_by=make_user("organizer"))


@pytest.fixture
def ticket_types(event) -> tuple[TicketType, TicketType]:
    return (
        TicketType.objects.create(event=event, name="General", price=Decimal("25.00"), currency="usd"),
        TicketType.objects.create(event=event, name="Student", price=Decimal("15.50"), currency="USD"),
    )


def cart_body(event, ticket_types, **extra) -> dict:
    general, student = ticket_types
    return {
        "items": [
            {
                "key": f"{event.id}:{general.id}",
                "eventId": str(event.id),
                "eventTitle": event.name,
                "ticketTypeId": str(general.id),
                "ticketLabel": general.name,
                "unitPrice": 25.00,
                "currency": "USD",
                "qty": 2,
            },
            {
                "eventId": str(event.id),
                "ticketTypeId": str(student.id),
                "unitPrice": "15.50",
                "currency": "usd",
                "qty": 1,
            },
        ],
        **extra,
    }


@pytest.mark.django_db
class TestCreatePaymentIntent:
    """Tests for POST /api/checkout/payment-intent"""

    def test_returns_client_secret(
        self, api_client: APIClient, checkout, payment_provider, event, ticket_types
    ):
        response = api_client.post(PAYMENT_INTENT_URL, cart_body(event, ticket_types), format="json")

        assert response.status_code == 201
        assert response.json() == {"clientSecret": "pi_1_secret"}
        assert payment_provider.requests[0].amount == 7147

    def test_static_coupon_applies(self, api_client, checkout, payment_provider, event, ticket_types):
        body = cart_body(event, ticket_types, couponCode="off10", customerEmail="buyer@example.com")
        response = api_client.post(PAYMENT_INTENT_URL, body, format="json")

        assert response.status_code == 201
        assert payment_provider.requests[0].amount == 6492
        assert payment_provider.requests[0].receipt_email == "buyer@example.com"

    def test_empty_cart(self, api_client, checkout):
        response = api_client.post(PAYMENT_INTENT_URL, {"items": []}, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "EMPTY_CART"

    def test_mixed_currency(self, api_client, checkout, event, ticket_types):
        body = cart_body(event, ticket_types)
        body["items"][1]["currency"] = "EUR"
        response = api_client.post(PAYMENT_INTENT_URL, body, format="json")
        assert response.status_code == 400
        assert response.json()["error"] == "Mixed currencies are not supported."

    def test_event_not_found(self, api_client, checkout, event, ticket_types):
        body = cart_body(event, ticket_types)
        body["items"][1]["eventId"] = str(uuid4())
        response = api_client.post(PAYMENT_INTENT_URL, body, format="json")
        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_ticket_type_not_found(self, api_client, checkout, event, ticket_types):
        body = cart_body(event, ticket_types)
        body["items"][1]["ticketTypeId"] = str(uuid4())
        response = api_client.post(PAYMENT_INTENT_URL, body, format="json")
        assert response.status_code == 404
        assert response.json()["code"] == "TICKET_TYPE_NOT_FOUND"

    def test_price_drift(self, api_client, checkout, payment_provider, event, ticket_types):
        general, _ = ticket_types
        general.price = Decimal("30.00")
        general.save()

        response = api_client.post(PAYMENT_INTENT_URL, cart_body(event, ticket_types), format="json")

        assert response.status_code == 409
        assert response.json() == {"error": "Ticket price changed. Please refresh.", "code": "PRICE_DRIFT"}
        assert payment_provider.requests == []

    def test_provider_failure(self, api_client, checkout, payment_provider, event, ticket_types):
        payment_provider.fail = True
        response = api_client.post(PAYMENT_INTENT_URL, cart_body(event, ticket_types), format="json")
        assert response.status_code == 500
        assert response.json()["code"] == "PAYMENT_PROVIDER_ERROR"

    def test_malformed_json(self, api_client, checkout):
        response = api_client.post(PAYMENT_INTENT_URL, "{not json", content_type="application/json")
        assert response.status_code == 400
        assert response.json()["error"] == "Malformed JSON body"

    def test_invalid_quantity(self, api_client, checkout, event, ticket_types):
        body = cart_body(event, ticket_types)
        body["items"][0]["qty"] = 0
        response = api_client.post(PAYMENT_INTENT_URL, body, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert "items" in response.json()["details"]

    def test_key_must_match_ids(self, api_client, checkout, payment_provider, event, ticket_types):
        body = cart_body(event, ticket_types)
        body["items"][0]["key"] = f"{event.id}:{uuid4()}"
        response = api_client.post(PAYMENT_INTENT_URL, body, format="json")
        assert response.status_code == 400
        assert response.json()["details"]["items"][0]["key"] == ["Key must be <eventId>:<ticketTypeId>."]
        assert payment_provider.requests == []


@pytest.mark.django_db
class TestQuote:
    """Tests for POST /api/checkout/quote"""

    def test_returns_breakdown(self, api_client, checkout, payment_provider, event, ticket_types):
        response = api_client.post(
            QUOTE_URL, cart_body(event, ticket_types, couponCode="MAX25"), format="json"
        )

        assert response.status_code == 200
        assert response.json() == {
            "currency": "USD",
            "subtotal": 65.5,
            "fees": 5.97,
            "discount": 4.99,
            "total": 66.48,
            "ticketCount": 3,
            "lines": [{"label": "3 Tickets", "amount": 65.5}],
        }
        assert payment_provider.requests == []
