"""
Viewset plumbing shared by the entity endpoints.

Views stay thin: they resolve the actor, hand the raw payload to a service
and wrap whatever comes back in ``api_response``. All rule checks live in
the services.
"""
from rest_framework import status, viewsets
from rest_framework.decorators import action

from .actor import ActorContext
from .store import find_by_id, search_page
from .utils import api_response
from .validators import ensure_mapping
from .workflow import status_message, transition_status


class ActorContextMixin:
    def get_actor(self):
        return ActorContext.from_request(self.request)


class ActionPermissionMixin:
    """Pick permission classes per viewset action, falling back to
    ``permission_classes``."""

    permission_classes_by_action = {}

    def get_permissions(self):
        classes = self.permission_classes_by_action.get(self.action, self.permission_classes)
        return [permission() for permission in classes]


class EntityViewSet(ActorContextMixin, ActionPermissionMixin, viewsets.ViewSet):
    """
    CRUD endpoints over one governed entity.

    Subclasses set ``label`` and ``list_key``, the queryset and
    serializer, and implement ``perform_create`` / ``perform_update`` /
    ``perform_destroy`` by calling their app's services.
    """

    label = ''
    list_key = ''
    queryset = None
    serializer_class = None
    search_field = 'name'
    option_fields = ('id', 'name')
    option_ordering = '-created_at'
    full_update_required = True

    def get_queryset(self):
        return self.queryset.all()

    def get_serializer(self, *args, **kwargs):
        return self.serializer_class(*args, **kwargs)

    def get_object(self, pk):
        return find_by_id(self.get_queryset(), pk, self.label)

    def list(self, request):
        items, pagination = search_page(
            self.get_queryset(), request.query_params, self.list_key, search_field=self.search_field,
        )
        return api_response(
            data={
                self.list_key: self.get_serializer(items, many=True).data,
                'pagination': pagination,
            }
        )

    @action(detail=False, methods=['get'], url_path='list')
    def select_list(self, request):
        """Lightweight id/name list for select inputs."""
        options = self.queryset.model.objects.order_by(self.option_ordering).values(*self.option_fields)
        return api_response(data=list(options))

    def retrieve(self, request, pk=None):
        instance = self.get_object(pk)
        return api_response(data=self.get_serializer(instance).data)

    def create(self, request):
        instance = self.perform_create(request.data, self.get_actor())
        instance = self.get_object(instance.pk)
        return api_response(
            message=f'{self.label} created successfully',
            data=self.get_serializer(instance).data,
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None):
        return self._update(request, pk, partial=not self.full_update_required)

    def partial_update(self, request, pk=None):
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, partial):
        instance = self.get_object(pk)
        instance = self.perform_update(instance, request.data, self.get_actor(), partial)
        instance = self.get_object(instance.pk)
        return api_response(
            message=f'{self.label} updated successfully',
            data=self.get_serializer(instance).data,
        )

    def destroy(self, request, pk=None):
        instance = self.get_object(pk)
        deleted = {'id': str(instance.pk), 'name': str(getattr(instance, 'name', instance))}
        self.perform_destroy(instance, self.get_actor())
        return api_response(message=f'{self.label} deleted successfully', data=deleted)

    def perform_create(self, data, actor):
        raise NotImplementedError

    def perform_update(self, instance, data, actor, partial):
        raise NotImplementedError

    def perform_destroy(self, instance, actor):
        raise NotImplementedError


class ApprovalStatusMixin:
    """Adds ``PATCH <id>/status/`` driving the approval workflow."""

    @action(detail=True, methods=['patch'], url_path='status')
    def change_status(self, request, pk=None):
        instance = self.get_object(pk)
        payload = ensure_mapping(request.data)
        transition_status(instance, payload.get('status'), actor=self.get_actor())
        return api_response(
            message=status_message(self.label, instance.status),
            data=self.get_serializer(self.get_object(instance.pk)).data,
        )
