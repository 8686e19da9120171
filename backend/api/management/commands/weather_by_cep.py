"""Management command resolving a CEP with the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from backend.api.services import get_resolution_service
from cepweather.context import CallContext
from cepweather.errors import ResolutionError, TransportError


class Command(BaseCommand):
    help = "Print the current temperature for a CEP as JSON"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("cep", type=str, help="Eight digit postal code")
        parser.add_argument(
            "--timeout",
            type=float,
            default=None,
            help="Overall deadline in seconds (defaults to RESOLUTION_TIMEOUT)",
        )

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        timeout = options.get("timeout") or settings.RESOLUTION_TIMEOUT
        context = CallContext.with_timeout(timeout)
        try:
            triple = get_resolution_service().resolve(options["cep"], context)
        except TransportError as exc:
            raise CommandError(f"{exc.message}: {exc}") from exc
        except ResolutionError as exc:
            raise CommandError(exc.message) from exc

        self.stdout.write(json.dumps(triple.as_payload()))
