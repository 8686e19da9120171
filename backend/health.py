from __future__ import annotations

from django.http import HttpResponse


def healthz(request) -> HttpResponse:
    """Liveness probe, independent of the providers."""
    return HttpResponse("ok", content_type="text/plain")
