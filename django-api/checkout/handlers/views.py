"""HTTP handlers (views) for checkout.

Handlers decode the body, call CheckoutService and serialize the
result. Domain errors are mapped by the DRF exception handler.
"""

from django.apps import apps
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from checkout.handlers.serializers import CartSerializer, PriceBreakdownSerializer
from checkout.services import CheckoutService
from tikd.decoding import decode_body
from tikd.errors import ErrorCode
from tikd.exception_handler import error_response


def checkout_service() -> CheckoutService:
    return apps.get_app_config("checkout").checkout_service


class PaymentIntentView(APIView):
    """Handler for POST /api/checkout/payment-intent"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        decoded = decode_body(request, CartSerializer)
        if not decoded.ok:
            return error_response(ErrorCode.VALIDATION_ERROR, decoded.reason, details=decoded.details)

        intent = checkout_service().create_payment_intent(CartSerializer.to_domain(decoded.data))
        return Response({"clientSecret": intent.client_secret}, status=status.HTTP_201_CREATED)


class QuoteView(APIView):
    """Handler for POST /api/checkout/quote"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        decoded = decode_body(request, CartSerializer)
        if not decoded.ok:
            return error_response(ErrorCode.VALIDATION_ERROR, decoded.reason, details=decoded.details)

        breakdown = checkout_service().quote(CartSerializer.to_domain(decoded.data))
        return Response(PriceBreakdownSerializer(breakdown).data)
