"""REST API view of the resolution service."""
from __future__ import annotations

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.api.exceptions import error_response
from backend.api.services import get_resolution_service
from cepweather.context import CallContext


class WeatherView(APIView):
    """Current temperature for a CEP, in Celsius, Fahrenheit and Kelvin."""

    def get(self, request, cep: str = "", *args, **kwargs):  # noqa: D401
        """Return ``{"temp_C", "temp_F", "temp_K"}`` for the CEP in the path."""
        if not cep:
            return error_response(status.HTTP_404_NOT_FOUND, "not found")

        context = CallContext.with_timeout(settings.RESOLUTION_TIMEOUT)
        triple = get_resolution_service().resolve(cep, context)
        return Response(triple.as_payload(), status=status.HTTP_200_OK)
