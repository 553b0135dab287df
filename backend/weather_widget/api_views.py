"""API endpoints for reading and updating widget options."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import mixins, viewsets
from rest_framework.authentication import BasicAuthentication, SessionAuthentication
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.permissions import IsAdminUser

from .models import Option
from .options import DEFAULT_OPTIONS, full_option_name
from .serializers import OptionSerializer


class OptionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """Declared widget options, addressed by their bare name."""

    authentication_classes = [SessionAuthentication, BasicAuthentication]
    permission_classes = [IsAdminUser]
    serializer_class = OptionSerializer
    lookup_field = "name"
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ["value"]
    ordering_fields = ["name", "updated_at"]
    search_fields = ["name"]

    def get_queryset(self):
        names = [full_option_name(name) for name in DEFAULT_OPTIONS]
        return Option.objects.filter(name__in=names)

    def get_object(self):
        self.kwargs[self.lookup_field] = full_option_name(self.kwargs[self.lookup_field])
        return super().get_object()
