"""
FoodQ API Serializers.
"""

from rest_framework import serializers

from foodq.models import Cook, IngredientKind, Recipe
from foodq.services import Onboarding, RecipeCatalog


class CookSerializer(serializers.ModelSerializer):
    """Serializer for Cook model (create only)."""

    class Meta:
        model = Cook
        fields = ["id", "name", "email", "subscription", "created_at"]
        read_only_fields = ["id", "created_at"]

    def create(self, validated_data):
        return Onboarding.create_cook(**validated_data)


class QueueCreateSerializer(serializers.Serializer):
    """Serializer for the internal queue creation endpoint."""

    cook = serializers.IntegerField(min_value=1, help_text="Cook id")


class RecipeIngredientSerializer(serializers.Serializer):
    """One ingredient line of a recipe."""

    name = serializers.CharField(source="ingredient.name", max_length=100)
    kind = serializers.ChoiceField(
        source="ingredient.kind", choices=IngredientKind.choices, required=False
    )
    amount = serializers.DecimalField(max_digits=10, decimal_places=3, required=False)
    unit = serializers.CharField(max_length=20, required=False, allow_blank=True)


class RecipeSerializer(serializers.ModelSerializer):
    """Serializer for Recipe model with nested ingredient lines."""

    ingredients = RecipeIngredientSerializer(many=True, required=False)
    dietary_restrictions = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False
    )

    class Meta:
        model = Recipe
        fields = [
            "id",
            "name",
            "instructions",
            "category",
            "cuisine",
            "servings",
            "dietary_restrictions",
            "total_time",
            "prep_time",
            "cook_time",
            "creator",
            "ingredients",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def create(self, validated_data):
        lines = validated_data.pop("ingredients", None)
        return RecipeCatalog.create(ingredients=_flatten(lines), **validated_data)

    def update(self, instance, validated_data):
        lines = validated_data.pop("ingredients", None)
        return RecipeCatalog.update(
            instance.pk, ingredients=_flatten(lines), **validated_data
        )


def _flatten(lines):
    # ingredient.name / ingredient.kind sources arrive nested
    if lines is None:
        return None
    return [
        {
            "name": line["ingredient"]["name"],
            "kind": line["ingredient"].get("kind"),
            "amount": line.get("amount", 1),
            "unit": line.get("unit", ""),
        }
        for line in lines
    ]


class SaveRecipeSerializer(serializers.Serializer):
    """Serializer for the save-recipe action."""

    cook = serializers.IntegerField(min_value=1, help_text="Cook id")


class EnqueueSerializer(serializers.Serializer):
    """Serializer for adding a recipe to a queue."""

    recipe = serializers.IntegerField(min_value=0, help_text="Recipe id")


class ReorderSerializer(serializers.Serializer):
    """Serializer for moving a recipe inside a queue."""

    recipe = serializers.IntegerField(min_value=0, help_text="Recipe id")
    position = serializers.IntegerField(
        help_text="Zero-based target index (0 = cook it next)"
    )
