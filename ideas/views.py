from rest_framework import status, viewsets

from accounts.permissions import IsAuthenticatedOrReadOnly
from accounts.store import find_by_id
from accounts.utils import api_response
from accounts.viewsets import ActorContextMixin

from . import services
from .models import Idea
from .serializers import IdeaSerializer


class IdeaViewSet(ActorContextMixin, viewsets.ViewSet):
    """
    Public idea board. Anyone can read; authenticated users post, and only
    the author may edit or delete.
    """

    permission_classes = [IsAuthenticatedOrReadOnly]

    def get_object(self, pk):
        return find_by_id(Idea, pk, 'Idea')

    def list(self, request):
        ideas = Idea.objects.order_by('-created_at')
        try:
            limit = int(request.query_params.get('_limit'))
        except (TypeError, ValueError):
            limit = None
        if limit and limit > 0:
            ideas = ideas[:limit]
        return api_response(data=IdeaSerializer(ideas, many=True).data)

    def retrieve(self, request, pk=None):
        return api_response(data=IdeaSerializer(self.get_object(pk)).data)

    def create(self, request):
        idea = services.create_idea(request.data, self.get_actor())
        return api_response(
            message='Idea created successfully',
            data=IdeaSerializer(idea).data,
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None):
        return self._update(request, pk, partial=False)

    def partial_update(self, request, pk=None):
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, partial):
        idea = services.update_idea(self.get_object(pk), request.data, self.get_actor(), partial=partial)
        return api_response(message='Idea updated successfully', data=IdeaSerializer(idea).data)

    def destroy(self, request, pk=None):
        services.delete_idea(self.get_object(pk), self.get_actor())
        return api_response(message='Idea deleted successfully')
