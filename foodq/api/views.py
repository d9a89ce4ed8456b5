"""
FoodQ API ViewSets.
"""

import logging

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from foodq.conf import get_queue_service
from foodq.exceptions import FoodQError
from foodq.models import Cook, Recipe
from foodq.services import Onboarding, RecipeCatalog
from .serializers import (
    CookSerializer,
    EnqueueSerializer,
    QueueCreateSerializer,
    RecipeSerializer,
    ReorderSerializer,
    SaveRecipeSerializer,
)

logger = logging.getLogger(__name__)


def _as_int(value, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise FoodQError("VALIDATION_ERROR", field=field, value=repr(value))


class FoodQErrorMixin:
    """Render FoodQError (and serializer errors) as {"code": ..., **details}."""

    def handle_exception(self, exc):
        if isinstance(exc, ValidationError):
            exc = FoodQError("VALIDATION_ERROR", fields=exc.detail)

        if isinstance(exc, FoodQError):
            if exc.status_code >= 500:
                logger.error(f"{self.request.path}: {exc}", extra={"code": exc.code})
            return Response(exc.as_dict(), status=exc.status_code)

        return super().handle_exception(exc)


class CookViewSet(FoodQErrorMixin, mixins.CreateModelMixin, viewsets.GenericViewSet):
    """
    Internal cook onboarding.

    create: Create a cook
    """

    queryset = Cook.objects.all()
    serializer_class = CookSerializer


class QueueProvisionViewSet(FoodQErrorMixin, viewsets.ViewSet):
    """
    Internal queue creation.

    create: Create the (single) queue of a cook
    """

    def create(self, request):
        """
        POST /api/foodq/internal/queues/
        {
            "cook": 12
        }
        """
        serializer = QueueCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        snapshot = Onboarding.create_queue(serializer.validated_data["cook"])
        return Response(
            {
                "id": snapshot.id,
                "cook": snapshot.cook_id,
                "recipes": list(snapshot.entries),
            },
            status=status.HTTP_201_CREATED,
        )


class RecipeViewSet(
    FoodQErrorMixin,
    mixins.CreateModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """
    ViewSet for Recipe.

    list: Recipes saved by a cook (?cook=<id>)
    create: Create a recipe
    retrieve: Get a recipe
    update: Update a recipe
    save: Add a recipe to a cook's saved recipes
    """

    queryset = Recipe.objects.all()
    serializer_class = RecipeSerializer

    def get_object(self):
        return RecipeCatalog.get(_as_int(self.kwargs["pk"], "recipe"))

    def list(self, request):
        """
        GET /api/foodq/recipes/?cook=12
        """
        cook_id = _as_int(request.query_params.get("cook"), "cook")
        recipes = RecipeCatalog.list_for_cook(cook_id)
        return Response(self.get_serializer(recipes, many=True).data)

    def retrieve(self, request, pk=None):
        return Response(self.get_serializer(self.get_object()).data)

    @action(detail=True, methods=["post"])
    def save(self, request, pk=None):
        """
        Save a recipe for a cook.

        POST /api/foodq/recipes/{pk}/save/
        {
            "cook": 12
        }
        """
        serializer = SaveRecipeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        saved = RecipeCatalog.save_for_cook(
            serializer.validated_data["cook"], _as_int(pk, "recipe")
        )
        return Response(
            {"cook": saved.cook_id, "recipe": saved.recipe_id},
            status=status.HTTP_201_CREATED,
        )


class QueueViewSet(FoodQErrorMixin, viewsets.ViewSet):
    """
    Recipe queue of a cook.

    recipes: List queued recipe ids (GET) or add one at the end (POST)
    next: The recipe to cook next
    order: Move a recipe to a position
    remove: Remove the first occurrence of a recipe
    """

    @property
    def queues(self):
        return get_queue_service()

    @action(detail=True, methods=["get", "post"])
    def recipes(self, request, pk=None):
        """
        GET  /api/foodq/queues/{pk}/recipes/
        POST /api/foodq/queues/{pk}/recipes/
        {
            "recipe": 42
        }
        """
        queue_id = _as_int(pk, "queue")

        if request.method == "GET":
            snapshot = self.queues.contents(queue_id)
            return Response(list(snapshot.entries))

        serializer = EnqueueSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        snapshot = self.queues.enqueue(queue_id, serializer.validated_data["recipe"])
        return Response({"length": snapshot.length}, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["delete"], url_path=r"recipes/(?P<recipe_id>[^/.]+)")
    def remove(self, request, pk=None, recipe_id=None):
        """
        DELETE /api/foodq/queues/{pk}/recipes/{recipe_id}/
        """
        self.queues.dequeue(_as_int(pk, "queue"), _as_int(recipe_id, "recipe"))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"])
    def next(self, request, pk=None):
        """
        GET /api/foodq/queues/{pk}/next/
        """
        next_up = self.queues.next(_as_int(pk, "queue"))
        return Response(
            {
                "queue": next_up.queue_id,
                "recipe": next_up.recipe_id,
                "empty": next_up.is_empty,
            }
        )

    @action(detail=True, methods=["post"])
    def order(self, request, pk=None):
        """
        Move a recipe to a zero-based position.

        POST /api/foodq/queues/{pk}/order/
        {
            "recipe": 42,
            "position": 0
        }
        """
        queue_id = _as_int(pk, "queue")
        serializer = ReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        snapshot = self.queues.reorder(
            queue_id,
            serializer.validated_data["recipe"],
            serializer.validated_data["position"],
        )
        return Response({"recipes": list(snapshot.entries)})
