"""Service-level endpoints that belong to no particular app."""

from typing import Any

from .response import BaseAPIView, api_response


class HealthView(BaseAPIView):
    authentication_classes: list[Any] = []
    permission_classes: list[Any] = []

    # noinspection PyMethodMayBeStatic
    def get(self, request):
        return api_response({"message": "Server is running"})
