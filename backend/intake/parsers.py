from __future__ import annotations

from rest_framework.parsers import JSONParser


class AnyContentJSONParser(JSONParser):
    """Decode the body as JSON whatever ``Content-Type`` the client sent.

    ``curl -d`` defaults to ``application/x-www-form-urlencoded``.
    """

    media_type = "*/*"
