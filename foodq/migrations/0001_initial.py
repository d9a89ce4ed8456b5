"""
Initial FoodQ schema.

- Cook, SavedRecipe
- Ingredient, Recipe, RecipeIngredient
- RecipeQueue (+ history)
"""

import decimal

import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        # ══════════════════════════════════════════════════════════════
        # COOK
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="Cook",
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
                (
                    "name",
                    models.CharField(
                        blank=True, max_length=200, null=True, verbose_name="Name"
                    ),
                ),
                (
                    "email",
                    models.EmailField(
                        blank=True,
                        max_length=254,
                        null=True,
                        unique=True,
                        verbose_name="Email",
                    ),
                ),
                (
                    "subscription",
                    models.BooleanField(default=False, verbose_name="Subscription"),
                ),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="created at"),
                ),
                (
                    "last_login_at",
                    models.DateTimeField(
                        blank=True, null=True, verbose_name="last login at"
                    ),
                ),
            ],
            options={
                "verbose_name": "Cook",
                "verbose_name_plural": "Cooks",
                "db_table": "foodq_cook",
                "ordering": ["id"],
            },
        ),
        # ══════════════════════════════════════════════════════════════
        # INGREDIENT
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="Ingredient",
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
                (
                    "name",
                    models.CharField(max_length=100, unique=True, verbose_name="Name"),
                ),
                (
                    "kind",
                    models.CharField(
                        choices=[
                            ("vegetable", "Vegetable"),
                            ("fruit", "Fruit"),
                            ("meat", "Meat"),
                            ("meat_alternative", "Meat alternative"),
                            ("fats", "Fats"),
                            ("dairy", "Dairy"),
                            ("grain", "Grain"),
                            ("spice", "Spice"),
                            ("pulse", "Pulse"),
                            ("other", "Other"),
                        ],
                        default="other",
                        max_length=20,
                        verbose_name="Kind",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="updated at"),
                ),
            ],
            options={
                "verbose_name": "Ingredient",
                "verbose_name_plural": "Ingredients",
                "db_table": "foodq_ingredient",
                "ordering": ["name"],
            },
        ),
        # ══════════════════════════════════════════════════════════════
        # RECIPE
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="Recipe",
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
                ("name", models.CharField(max_length=200, verbose_name="Name")),
                (
                    "instructions",
                    models.TextField(blank=True, verbose_name="Instructions"),
                ),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("breakfast", "Breakfast"),
                            ("lunch", "Lunch"),
                            ("dinner", "Dinner"),
                            ("dessert", "Dessert"),
                            ("snack", "Snack"),
                        ],
                        default="dinner",
                        max_length=20,
                        verbose_name="Category",
                    ),
                ),
                (
                    "cuisine",
                    models.CharField(blank=True, max_length=100, verbose_name="Cuisine"),
                ),
                (
                    "servings",
                    models.PositiveSmallIntegerField(default=1, verbose_name="Servings"),
                ),
                (
                    "dietary_restrictions",
                    models.JSONField(
                        blank=True, default=list, verbose_name="Dietary restrictions"
                    ),
                ),
                (
                    "total_time",
                    models.DurationField(blank=True, null=True, verbose_name="Total time"),
                ),
                (
                    "prep_time",
                    models.DurationField(blank=True, null=True, verbose_name="Prep time"),
                ),
                (
                    "cook_time",
                    models.DurationField(blank=True, null=True, verbose_name="Cook time"),
                ),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="updated at"),
                ),
                (
                    "creator",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="created_recipes",
                        to="foodq.cook",
                        verbose_name="Creator",
                    ),
                ),
            ],
            options={
                "verbose_name": "Recipe",
                "verbose_name_plural": "Recipes",
                "db_table": "foodq_recipe",
                "ordering": ["name", "id"],
                "indexes": [
                    models.Index(fields=["category"], name="foodq_recipe_category_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="RecipeIngredient",
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
                (
                    "amount",
                    models.DecimalField(
                        decimal_places=3,
                        default=decimal.Decimal("1"),
                        max_digits=10,
                        verbose_name="Amount",
                    ),
                ),
                (
                    "unit",
                    models.CharField(
                        blank=True,
                        help_text="g, kg, ml, cup, tbsp, un...",
                        max_length=20,
                        verbose_name="Unit",
                    ),
                ),
                (
                    "ingredient",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="recipe_lines",
                        to="foodq.ingredient",
                        verbose_name="Ingredient",
                    ),
                ),
                (
                    "recipe",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ingredients",
                        to="foodq.recipe",
                        verbose_name="Recipe",
                    ),
                ),
            ],
            options={
                "verbose_name": "Recipe Ingredient",
                "verbose_name_plural": "Recipe Ingredients",
                "db_table": "foodq_recipe_ingredient",
                "ordering": ["recipe", "id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("recipe", "ingredient"),
                        name="foodq_recipe_ingredient_unique",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="SavedRecipe",
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
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="created at"),
                ),
                (
                    "cook",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="saved_recipes",
                        to="foodq.cook",
                        verbose_name="Cook",
                    ),
                ),
                (
                    "recipe",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="saved_by",
                        to="foodq.recipe",
                        verbose_name="Recipe",
                    ),
                ),
            ],
            options={
                "verbose_name": "Saved Recipe",
                "verbose_name_plural": "Saved Recipes",
                "db_table": "foodq_saved_recipe",
                "ordering": ["created_at", "id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("cook", "recipe"), name="foodq_saved_recipe_unique"
                    )
                ],
            },
        ),
        # ══════════════════════════════════════════════════════════════
        # RECIPE QUEUE
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="RecipeQueue",
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
                (
                    "entries",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="Recipe ids in cooking order",
                        verbose_name="Entries",
                    ),
                ),
                (
                    "version",
                    models.PositiveIntegerField(default=0, verbose_name="Version"),
                ),
                (
                    "created_at",
                    models.DateTimeField(auto_now_add=True, verbose_name="created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="updated at"),
                ),
                (
                    "cook",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="queue",
                        to="foodq.cook",
                        verbose_name="Cook",
                    ),
                ),
            ],
            options={
                "verbose_name": "Recipe Queue",
                "verbose_name_plural": "Recipe Queues",
                "db_table": "foodq_queue",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="HistoricalRecipeQueue",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        auto_created=True, blank=True, db_index=True, verbose_name="ID"
                    ),
                ),
                (
                    "entries",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="Recipe ids in cooking order",
                        verbose_name="Entries",
                    ),
                ),
                (
                    "version",
                    models.PositiveIntegerField(default=0, verbose_name="Version"),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        blank=True, editable=False, verbose_name="created at"
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        blank=True, editable=False, verbose_name="updated at"
                    ),
                ),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                (
                    "history_type",
                    models.CharField(
                        choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                        max_length=1,
                    ),
                ),
                (
                    "cook",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to="foodq.cook",
                        verbose_name="Cook",
                    ),
                ),
                (
                    "history_user",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "historical Recipe Queue",
                "verbose_name_plural": "historical Recipe Queues",
                "db_table": "foodq_historicalrecipequeue",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
