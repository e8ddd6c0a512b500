"""Unit tests for FriendService.

These test the friend request lifecycle against in-memory stores.
Run with: pytest tests/test_friend_service.py -v
"""

import pytest

from friends.domain import FriendshipStatus, SkipReason
from friends.domain.errors import (
    FriendRequestNotFoundError,
    InvalidRequestIdError,
    NoRecipientsError,
    NotRecipientError,
    SelfRequestError,
    UserEmailNotFoundError,
)
from friends.services import FriendService

ADA, GRACE, ALAN = 1, 2, 3


@pytest.fixture
def service(friendship_store, user_directory) -> FriendService:
    return FriendService(friendship_store, user_directory)


def only_edge(store):
    [edge] = store.edges.values()
    return edge


class TestSendRequests:
    """Tests for batch request creation."""

    def test_creates_pending_edge(self, service, friendship_store):
        [outcome] = service.send_requests(ADA, [GRACE])

        edge = only_edge(friendship_store)
        assert outcome.created
        assert outcome.friendship_id == edge.id
        assert (edge.requester_id, edge.recipient_id, edge.status) == (ADA, GRACE, FriendshipStatus.PENDING)

    def test_reverse_request_reports_already_pending(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])

        [outcome] = service.send_requests(GRACE, [ADA])

        assert outcome.reason is SkipReason.ALREADY_PENDING
        assert len(friendship_store.edges) == 1

    def test_already_friends(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        service.accept(only_edge(friendship_store).id, GRACE)

        [outcome] = service.send_requests(ADA, [GRACE])

        assert outcome.reason is SkipReason.ALREADY_FRIENDS

    def test_resend_after_decline_reopens_edge(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        edge = only_edge(friendship_store)
        service.decline(edge.id, GRACE)

        [outcome] = service.send_requests(ADA, [GRACE])

        reopened = only_edge(friendship_store)
        assert outcome.created
        assert reopened.id == edge.id
        assert (reopened.requester_id, reopened.recipient_id) == (ADA, GRACE)
        assert reopened.status is FriendshipStatus.PENDING

    def test_declined_side_may_reopen_with_new_direction(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        service.decline(only_edge(friendship_store).id, GRACE)

        service.send_requests(GRACE, [ADA])

        edge = only_edge(friendship_store)
        assert (edge.requester_id, edge.recipient_id) == (GRACE, ADA)
        assert edge.status is FriendshipStatus.PENDING

    def test_batch_reports_each_recipient(self, service):
        service.send_requests(ALAN, [ADA])

        outcomes = service.send_requests(ADA, [GRACE, ALAN, 99, GRACE, ADA])

        assert [(o.recipient_id, o.reason) for o in outcomes] == [
            (GRACE, None),
            (ALAN, SkipReason.ALREADY_PENDING),
            (99, SkipReason.USER_NOT_FOUND),
        ]

    def test_only_self_is_rejected(self, service):
        with pytest.raises(NoRecipientsError):
            service.send_requests(ADA, [ADA])

    def test_concurrent_insert_is_classified(self, service, friendship_store, monkeypatch):
        """If the other side inserts between lookup and create, the existing edge wins."""
        real_find = friendship_store.find_between
        calls = []

        def stale_first_lookup(a, b):
            calls.append((a, b))
            if len(calls) == 1:
                friendship_store.create(b, a)
                return None
            return real_find(a, b)

        monkeypatch.setattr(friendship_store, "find_between", stale_first_lookup)

        [outcome] = service.send_requests(ADA, [GRACE])

        assert outcome.reason is SkipReason.ALREADY_PENDING
        assert len(friendship_store.edges) == 1


class TestSendRequestByEmail:
    def test_creates_request(self, service, friendship_store):
        outcome = service.send_request_by_email(ADA, " Grace@Example.com ")
        assert outcome.created
        assert outcome.recipient_email == "grace@example.com"
        assert only_edge(friendship_store).recipient_id == GRACE

    def test_unknown_email(self, service):
        with pytest.raises(UserEmailNotFoundError):
            service.send_request_by_email(ADA, "nobody@example.com")

    def test_own_email(self, service):
        with pytest.raises(SelfRequestError):
            service.send_request_by_email(ADA, "ada@example.com")


class TestSettle:
    """Tests for accept / decline."""

    def test_accept_is_idempotent(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        edge_id = only_edge(friendship_store).id

        first = service.accept(edge_id, GRACE)
        second = service.accept(edge_id, GRACE)

        assert first.status is FriendshipStatus.ACCEPTED
        assert second.status is FriendshipStatus.ACCEPTED

    def test_decline_after_accept_is_noop(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        edge_id = only_edge(friendship_store).id
        service.accept(edge_id, GRACE)

        assert service.decline(edge_id, GRACE).status is FriendshipStatus.ACCEPTED

    def test_only_recipient_may_accept(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        with pytest.raises(NotRecipientError):
            service.accept(only_edge(friendship_store).id, ADA)

    def test_only_recipient_may_decline(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        with pytest.raises(NotRecipientError):
            service.decline(only_edge(friendship_store).id, ALAN)

    def test_unknown_request(self, service):
        with pytest.raises(FriendRequestNotFoundError):
            service.accept("00000000-0000-0000-0000-000000000000", GRACE)

    def test_malformed_request_id(self, service):
        with pytest.raises(InvalidRequestIdError):
            service.accept("abc", GRACE)


class TestRemoveAndList:
    def test_remove_accepted_edge(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        service.accept(only_edge(friendship_store).id, GRACE)

        service.remove(GRACE, ADA)

        assert friendship_store.edges == {}

    def test_remove_is_idempotent(self, service):
        service.remove(ADA, GRACE)
        service.remove(ADA, GRACE)

    def test_remove_leaves_pending_requests(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        service.remove(ADA, GRACE)
        assert len(friendship_store.edges) == 1

    def test_list_friends_from_either_side(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        service.accept(only_edge(friendship_store).id, GRACE)

        [from_ada] = service.list_friends(ADA)
        [from_grace] = service.list_friends(GRACE)

        assert (from_ada.user_id, from_ada.friend.name) == (ADA, "Grace Hopper")
        assert (from_grace.user_id, from_grace.friend.name) == (GRACE, "Ada Lovelace")

    def test_list_incoming(self, service):
        service.send_requests(ADA, [GRACE])
        service.send_requests(ALAN, [GRACE])

        incoming = service.list_incoming(GRACE)

        assert {request.sender.id for request in incoming} == {ADA, ALAN}
        assert service.list_incoming(ADA) == []


class TestCandidates:
    """Tests for the people-search used to pick request recipients."""

    def test_excludes_self(self, service):
        assert [user.id for user in service.candidates(ADA)] == [GRACE, ALAN]

    def test_excludes_pending_edges_in_either_direction(self, service):
        service.send_requests(ADA, [GRACE])
        service.send_requests(ALAN, [ADA])
        assert service.candidates(ADA) == []
        assert [user.id for user in service.candidates(GRACE)] == [ALAN]

    def test_excludes_friends(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        service.accept(only_edge(friendship_store).id, GRACE)
        assert [user.id for user in service.candidates(GRACE)] == [ALAN]

    def test_declined_edge_can_be_asked_again(self, service, friendship_store):
        service.send_requests(ADA, [GRACE])
        service.decline(only_edge(friendship_store).id, GRACE)
        assert GRACE in [user.id for user in service.candidates(ADA)]

    def test_query_matches_name_or_email(self, service):
        assert [user.id for user in service.candidates(ADA, " grace ")] == [GRACE]
        assert [user.id for user in service.candidates(ADA, "ALAN@")] == [ALAN]

    def test_query_without_match(self, service):
        assert service.candidates(ADA, "nobody") == []
