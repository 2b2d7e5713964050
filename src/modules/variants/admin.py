from django.contrib import admin, messages

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.variants.exceptions import LastVariantError
from modules.variants.models import Variant
from modules.variants.repositories.django_repository import VariantDjangoRepository
from modules.variants.services import VariantService


@admin.register(Variant)
class VariantAdmin(admin.ModelAdmin):
    """Deletes go through ``VariantService`` so the last-variant guard holds."""

    list_display = ["sku", "name", "product", "price_cents", "inventory_count"]
    search_fields = ["sku", "name"]
    list_select_related = ["product"]

    @staticmethod
    def _service() -> VariantService:
        return VariantService(VariantDjangoRepository(), ProductDjangoRepository())

    def has_delete_permission(self, request, obj=None):
        if obj is not None and Variant.objects.filter(product_id=obj.product_id).count() <= 1:
            return False
        return super().has_delete_permission(request, obj)

    def delete_model(self, request, obj):
        self._service().delete_variant(obj.pk)

    def delete_queryset(self, request, queryset):
        service = self._service()
        for variant in queryset:
            try:
                service.delete_variant(variant.pk)
            except LastVariantError as exc:
                self.message_user(request, f"{variant.sku}: {exc.message}", messages.ERROR)
