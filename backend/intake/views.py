"""Public intake endpoint: validate the CEP locally, then forward it."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from django.http import HttpResponse
from rest_framework import exceptions, status
from rest_framework.views import APIView

from backend.api.exceptions import error_response
from backend.intake.client import ResolutionServiceClient
from backend.intake.parsers import AnyContentJSONParser
from cepweather.cep import is_valid_cep
from cepweather.errors import InvalidFormat


@lru_cache(maxsize=1)
def get_resolution_client() -> ResolutionServiceClient:
    return ResolutionServiceClient(
        settings.RESOLUTION_SERVICE_URL,
        timeout=settings.FORWARD_TIMEOUT,
    )


class CepIntakeView(APIView):
    """Accept ``{"cep": "..."}`` and relay the resolution service's answer."""

    parser_classes = [AnyContentJSONParser]

    def post(self, request, *args, **kwargs):  # noqa: D401
        """Reject malformed CEPs before any network hop."""
        if request.stream is None:
            raise exceptions.ParseError("empty body")
        data = request.data
        if not isinstance(data, dict):
            raise exceptions.ParseError("expected a JSON object")
        cep = data.get("cep")
        if not is_valid_cep(cep):
            return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, InvalidFormat.message)

        upstream = get_resolution_client().forward(cep)
        return HttpResponse(
            upstream.content,
            status=upstream.status_code,
            content_type="application/json",
        )
