from django.contrib import admin

from modules.products.models import Product
from modules.variants.models import Variant


class VariantInline(admin.TabularInline):
    model = Variant
    extra = 0
    min_num = 1

    def get_formset(self, request, obj=None, **kwargs):
        # Refuse a change form that would leave the product without variants.
        kwargs.setdefault("validate_min", True)
        return super().get_formset(request, obj, **kwargs)


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "status", "deleted_at", "created_at"]
    list_filter = ["status", "category"]
    search_fields = ["name", "description"]
    inlines = [VariantInline]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("category")

    def get_deleted_objects(self, objs, request):
        """Deleting a product only stamps ``deleted_at``; its variants stay."""
        objs = list(objs)
        model_count = {Product._meta.verbose_name_plural: len(objs)}
        return [str(obj) for obj in objs], model_count, set(), []
