"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from decimal import Decimal
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from checkout.domain import Coupon, PaymentRequest
from checkout.domain.errors import PaymentProviderError
from checkout.stores.interfaces import CouponStore, PaymentProvider
from events.domain import Capacity, Currency, EventId, Money, TicketType, TicketTypeId
from events.stores.interfaces import EventStore
from friends.domain import Friendship, FriendshipStatus, UserSummary
from friends.domain.errors import FriendshipExistsError
from friends.stores.interfaces import FriendshipStore, UserDirectory


class FakeEventStore(EventStore):
    """In-memory ticket types keyed by event ID."""

    def __init__(self) -> None:
        self.ticket_types: dict[EventId, dict[TicketTypeId, TicketType]] = {}

    def add_ticket_type(self, event_id: str, price: str, currency: str = "USD") -> str:
        parsed_event = EventId.from_string(event_id)
        ticket_type = TicketType(
            id=TicketTypeId(uuid4()),
            event_id=parsed_event,
            name="General",
            price=Money(Decimal(price)),
            currency=Currency(currency),
            quantity=Capacity(100),
        )
        self.ticket_types.setdefault(parsed_event, {})[ticket_type.id] = ticket_type
        return str(ticket_type.id)

    def get_event(self, event_id):
        raise NotImplementedError

    def get_ticket_types(self, event_id):
        return self.ticket_types.get(event_id)


class FakeCouponStore(CouponStore):
    def __init__(self, coupons: dict[str, Coupon] | None = None) -> None:
        self.coupons = coupons or {}
        self.lookups: list[tuple[str, tuple[tuple[str, str], ...]]] = []

    def find_coupon(self, code, lines=()):
        self.lookups.append((code, lines))
        return self.coupons.get(code.strip().upper())


class FakePaymentProvider(PaymentProvider):
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.requests: list[PaymentRequest] = []

    def create_payment_intent(self, request):
        self.requests.append(request)
        if self.fail:
            raise PaymentProviderError("card_declined")
        return f"pi_{len(self.requests)}_secret"


class FakeFriendshipStore(FriendshipStore):
    def __init__(self) -> None:
        self.edges: dict[str, Friendship] = {}

    def get(self, friendship_id):
        return self.edges.get(friendship_id)

    def find_between(self, user_a, user_b):
        for edge in self.edges.values():
            if {edge.requester_id, edge.recipient_id} == {user_a, user_b}:
                return edge
        return None

    def create(self, requester_id, recipient_id):
        if self.find_between(requester_id, recipient_id) is not None:
            raise FriendshipExistsError()
        edge = Friendship(
            id=str(uuid4()),
            requester_id=requester_id,
            recipient_id=recipient_id,
            status=FriendshipStatus.PENDING,
        )
        self.edges[edge.id] = edge
        return edge

    def save(self, friendship):
        self.edges[friendship.id] = replace(friendship)
        return friendship

    def delete(self, friendship_id):
        self.edges.pop(friendship_id, None)

    def list_accepted(self, user_id):
        return [
            edge
            for edge in self.edges.values()
            if edge.status is FriendshipStatus.ACCEPTED
            and user_id in (edge.requester_id, edge.recipient_id)
        ]

    def list_incoming_pending(self, user_id):
        return [
            edge
            for edge in self.edges.values()
            if edge.status is FriendshipStatus.PENDING and edge.recipient_id == user_id
        ]

    def linked_user_ids(self, user_id):
        linked = set()
        for edge in self.edges.values():
            if edge.status is FriendshipStatus.DECLINED:
                continue
            if user_id in (edge.requester_id, edge.recipient_id):
                linked.add(edge.other_party(user_id))
        return linked


class FakeUserDirectory(UserDirectory):
    def __init__(self, users: dict[int, tuple[str, str]]) -> None:
        self.users = users

    def existing_ids(self, user_ids):
        return {uid for uid in user_ids if uid in self.users}

    def find_id_by_email(self, email):
        for uid, (_, user_email) in self.users.items():
            if user_email == email:
                return uid
        return None

    def summaries(self, user_ids):
        return {
            uid: UserSummary(id=uid, name=self.users[uid][0], email=self.users[uid][1])
            for uid in user_ids
            if uid in self.users
        }

    def search(self, query, exclude_ids, limit=25):
        query = query.lower()
        matches = [
            UserSummary(id=uid, name=name, email=email)
            for uid, (name, email) in sorted(self.users.items())
            if uid not in exclude_ids and (query in name.lower() or query in email.lower())
        ]
        return matches[:limit]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_store() -> FakeEventStore:
    return FakeEventStore()


@pytest.fixture
def coupon_store() -> FakeCouponStore:
    return FakeCouponStore()


@pytest.fixture
def payment_provider() -> FakePaymentProvider:
    return FakePaymentProvider()


@pytest.fixture
def friendship_store() -> FakeFriendshipStore:
    return FakeFriendshipStore()


@pytest.fixture
def user_directory() -> FakeUserDirectory:
    return FakeUserDirectory(
        {
            1: ("Ada Lovelace", "ada@example.com"),
            2: ("Grace Hopper", "grace@example.com"),
            3: ("Alan Turing", "alan@example.com"),
        }
    )


@pytest.fixture
def make_user(django_user_model):
    def _make(username: str, **extra):
        extra.setdefault("email", f"{username}@example.com")
        return django_user_model.objects.create_user(username=username, password="pw", **extra)

    return _make
