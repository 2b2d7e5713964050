import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Variant",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("sku", models.CharField(max_length=64)),
                ("sku_key", models.CharField(editable=False, max_length=128)),
                ("name", models.CharField(max_length=255)),
                ("price_cents", models.PositiveIntegerField()),
                ("inventory_count", models.PositiveIntegerField(default=0)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variants",
                        to="products.product",
                    ),
                ),
            ],
            options={
                "db_table": "variants",
                "ordering": ["created_at", "id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("sku_key",), name="variants_sku_key_unique"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("price_cents__gte", 0)),
                        name="variants_price_cents_non_negative",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("inventory_count__gte", 0)),
                        name="variants_inventory_count_non_negative",
                    ),
                ],
            },
        ),
    ]
