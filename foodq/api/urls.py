"""
FoodQ API URLs.

Include this in your project's urlpatterns:

    path('api/foodq/', include('foodq.api.urls')),

The internal/ routes are meant for service-to-service calls (onboarding);
protect them with DEFAULT_PERMISSION_CLASSES or at the proxy.
"""

from rest_framework.routers import DefaultRouter

from .views import CookViewSet, QueueProvisionViewSet, QueueViewSet, RecipeViewSet

router = DefaultRouter()
router.register("internal/cooks", CookViewSet)
router.register("internal/queues", QueueProvisionViewSet, basename="queue-provision")
router.register("recipes", RecipeViewSet)
router.register("queues", QueueViewSet, basename="queue")

urlpatterns = router.urls
