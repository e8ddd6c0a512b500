"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.apps import apps
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.serializers import PromoCodeInputSerializer, PromoCodeSerializer
from events.services import PromoCodeService
from tikd.decoding import decode_body
from tikd.errors import ErrorCode
from tikd.exception_handler import error_response


def promo_code_service() -> PromoCodeService:
    return apps.get_app_config("events").promo_code_service


class PromoCodeListView(APIView):
    """Handler for GET/POST /api/events/{event_id}/promo-codes"""

    def get(self, request: Request, event_id: str) -> Response:
        promos = promo_code_service().list_for_event(event_id, request.user.pk)
        return Response(PromoCodeSerializer(promos, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        decoded = decode_body(request, PromoCodeInputSerializer)
        if not decoded.ok:
            return error_response(ErrorCode.VALIDATION_ERROR, decoded.reason, details=decoded.details)

        promo = promo_code_service().create(
            event_id, request.user.pk, PromoCodeInputSerializer.to_domain(decoded.data)
        )
        return Response(PromoCodeSerializer(promo).data, status=status.HTTP_201_CREATED)


class PromoCodeDetailView(APIView):
    """Handler for GET/PATCH/DELETE /api/events/{event_id}/promo-codes/{promo_code_id}"""

    def get(self, request: Request, event_id: str, promo_code_id: str) -> Response:
        promo = promo_code_service().get(event_id, promo_code_id, request.user.pk)
        return Response(PromoCodeSerializer(promo).data)

    def patch(self, request: Request, event_id: str, promo_code_id: str) -> Response:
        decoded = decode_body(request, PromoCodeInputSerializer, partial=True)
        if not decoded.ok:
            return error_response(ErrorCode.VALIDATION_ERROR, decoded.reason, details=decoded.details)

        promo = promo_code_service().update(
            event_id, promo_code_id, request.user.pk, PromoCodeInputSerializer.to_domain(decoded.data)
        )
        return Response(PromoCodeSerializer(promo).data)

    def delete(self, request: Request, event_id: str, promo_code_id: str) -> Response:
        promo_code_service().delete(event_id, promo_code_id, request.user.pk)
        return Response({"ok": True})
