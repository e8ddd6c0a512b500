"""HTTP handlers (views) for friends and friend requests.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
"""

from django.apps import apps
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from friends.handlers.serializers import (
    CandidateSerializer,
    FriendSerializer,
    IncomingRequestSerializer,
    SendRequestSerializer,
    outcomes_payload,
)
from friends.services import FriendService
from tikd.decoding import decode_body
from tikd.errors import ErrorCode
from tikd.exception_handler import error_response


def friend_service() -> FriendService:
    return apps.get_app_config("friends").friend_service


class FriendListView(APIView):
    """Handler for GET /api/friends"""

    def get(self, request: Request) -> Response:
        friends = friend_service().list_friends(request.user.pk)
        return Response(FriendSerializer(friends, many=True).data)


class FriendCandidatesView(APIView):
    """Handler for GET /api/friends/candidates?q="""

    def get(self, request: Request) -> Response:
        candidates = friend_service().candidates(request.user.pk, request.query_params.get("q", ""))
        return Response(CandidateSerializer(candidates, many=True).data)


class FriendDetailView(APIView):
    """Handler for DELETE /api/friends/{user_id}"""

    def delete(self, request: Request, user_id: str) -> Response:
        if not user_id.isdigit():
            return error_response(ErrorCode.VALIDATION_ERROR, "Invalid userId")
        friend_service().remove(request.user.pk, int(user_id))
        return Response({"ok": True})


class FriendRequestListView(APIView):
    """Handler for GET/POST /api/friends/requests"""

    def get(self, request: Request) -> Response:
        incoming = friend_service().list_incoming(request.user.pk)
        return Response(IncomingRequestSerializer(incoming, many=True).data)

    def post(self, request: Request) -> Response:
        decoded = decode_body(request, SendRequestSerializer)
        if not decoded.ok:
            return error_response(ErrorCode.VALIDATION_ERROR, decoded.reason, details=decoded.details)

        if "toEmail" in decoded.data:
            outcomes = [friend_service().send_request_by_email(request.user.pk, decoded.data["toEmail"])]
        else:
            outcomes = friend_service().send_requests(
                request.user.pk, SendRequestSerializer.user_ids(decoded.data)
            )
        return Response(outcomes_payload(outcomes), status=status.HTTP_201_CREATED)


class AcceptFriendRequestView(APIView):
    """Handler for POST /api/friends/requests/{request_id}/accept"""

    def post(self, request: Request, request_id: str) -> Response:
        friend_service().accept(request_id, request.user.pk)
        return Response({"ok": True})


class DeclineFriendRequestView(APIView):
    """Handler for POST /api/friends/requests/{request_id}/decline"""

    def post(self, request: Request, request_id: str) -> Response:
        friend_service().decline(request_id, request.user.pk)
        return Response({"ok": True})
