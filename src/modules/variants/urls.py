"""Variant URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.variants.views import VariantViewSet

router = SimpleRouter(trailing_slash=False)
router.register("variants", VariantViewSet, basename="variant")

urlpatterns = router.urls
