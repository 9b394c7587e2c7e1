import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "product_type",
                    models.CharField(
                        choices=[
                            ("NORMAL", "Normal"),
                            ("SEASONAL", "Seasonal"),
                            ("EXPIRABLE", "Expirable"),
                        ],
                        default="NORMAL",
                        max_length=32,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("available", models.PositiveIntegerField(default=0)),
                ("lead_time", models.PositiveIntegerField(default=0)),
                (
                    "expiry_date",
                    models.DateField(blank=True, default=None, null=True),
                ),
                (
                    "season_start_date",
                    models.DateField(blank=True, default=None, null=True),
                ),
                (
                    "season_end_date",
                    models.DateField(blank=True, default=None, null=True),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["product_type"], name="products_type_idx")
                ],
            },
        ),
    ]
