"""
Tests for FoodQ API ViewSets (foodq.api.views).

Verifies the DRF endpoints for onboarding, recipes and queues, and the
error code → HTTP status mapping.
"""

import pytest

pytestmark = pytest.mark.urls("foodq.tests.test_api_urls")
from unittest.mock import patch

from rest_framework.test import APIClient

from foodq.conf import reset_queue_service
from foodq.exceptions import FoodQError
from foodq.models import Cook, Recipe, RecipeQueue, SavedRecipe
from foodq.services import Onboarding, RecipeCatalog


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def orm_service(settings):
    settings.FOODQ = {"QUEUE_STORE": "foodq.adapters.orm.OrmQueueStore"}
    reset_queue_service()
    yield
    reset_queue_service()


@pytest.fixture
def api_client(db):
    return APIClient()


@pytest.fixture
def cook(db):
    return Onboarding.create_cook(name="Ana", email="ana@example.com")


@pytest.fixture
def queue_id(cook):
    return Onboarding.create_queue(cook).id


@pytest.fixture
def recipe(db, cook):
    return RecipeCatalog.create(name="Pancakes", creator=cook)


def queue_url(queue_id, suffix=""):
    return f"/api/foodq/queues/{queue_id}/{suffix}"


# ═══════════════════════════════════════════════════════════════════
# Onboarding (internal)
# ═══════════════════════════════════════════════════════════════════


class TestOnboardingAPI:
    def test_create_cook(self, api_client):
        response = api_client.post(
            "/api/foodq/internal/cooks/",
            {"name": "Bia", "email": "bia@example.com", "subscription": True},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["email"] == "bia@example.com"
        assert Cook.objects.get(pk=response.data["id"]).subscription is True

    def test_create_cook_without_fields(self, api_client):
        response = api_client.post("/api/foodq/internal/cooks/", {}, format="json")

        assert response.status_code == 201
        assert response.data["name"] is None
        assert response.data["email"] is None

    def test_create_cook_bad_email(self, api_client):
        response = api_client.post(
            "/api/foodq/internal/cooks/", {"email": "nope"}, format="json"
        )

        assert response.status_code == 400
        assert response.data["code"] == "VALIDATION_ERROR"
        assert "email" in response.data["fields"]

    def test_create_queue(self, api_client, cook):
        response = api_client.post(
            "/api/foodq/internal/queues/", {"cook": cook.pk}, format="json"
        )

        assert response.status_code == 201
        assert response.data["cook"] == cook.pk
        assert response.data["recipes"] == []
        assert RecipeQueue.objects.filter(pk=response.data["id"]).exists()

    def test_create_queue_twice(self, api_client, cook, queue_id):
        response = api_client.post(
            "/api/foodq/internal/queues/", {"cook": cook.pk}, format="json"
        )

        assert response.status_code == 409
        assert response.data["code"] == "QUEUE_EXISTS"

    def test_create_queue_unknown_cook(self, api_client):
        response = api_client.post(
            "/api/foodq/internal/queues/", {"cook": 999}, format="json"
        )

        assert response.status_code == 404
        assert response.data["code"] == "COOK_NOT_FOUND"

    def test_create_queue_missing_cook(self, api_client):
        response = api_client.post("/api/foodq/internal/queues/", {}, format="json")
        assert response.status_code == 400


# ═══════════════════════════════════════════════════════════════════
# RecipeViewSet
# ═══════════════════════════════════════════════════════════════════


class TestRecipeAPI:
    def test_create_recipe(self, api_client, cook):
        response = api_client.post(
            "/api/foodq/recipes/",
            {
                "name": "Shakshuka",
                "category": "breakfast",
                "cuisine": "Maghrebi",
                "servings": 2,
                "dietary_restrictions": ["vegetarian"],
                "prep_time": "00:10:00",
                "creator": cook.pk,
                "ingredients": [
                    {"name": "Egg", "kind": "other", "amount": "4", "unit": "un"},
                    {"name": "Tomato", "kind": "vegetable"},
                ],
            },
            format="json",
        )

        assert response.status_code == 201
        assert response.data["category"] == "breakfast"
        assert response.data["prep_time"] == "00:10:00"
        assert [i["name"] for i in response.data["ingredients"]] == ["Egg", "Tomato"]
        assert Recipe.objects.get(pk=response.data["id"]).creator == cook

    def test_create_recipe_invalid(self, api_client):
        response = api_client.post(
            "/api/foodq/recipes/", {"name": "Air", "servings": 0}, format="json"
        )

        assert response.status_code == 400
        assert response.data["code"] == "VALIDATION_ERROR"
        assert not Recipe.objects.filter(name="Air").exists()

    def test_create_recipe_missing_name(self, api_client):
        response = api_client.post("/api/foodq/recipes/", {}, format="json")

        assert response.status_code == 400
        assert "name" in response.data["fields"]

    def test_retrieve_recipe(self, api_client, recipe):
        response = api_client.get(f"/api/foodq/recipes/{recipe.pk}/")

        assert response.status_code == 200
        assert response.data["name"] == "Pancakes"

    def test_retrieve_missing(self, api_client):
        response = api_client.get("/api/foodq/recipes/999/")

        assert response.status_code == 404
        assert response.data == {"code": "RECIPE_NOT_FOUND", "recipe": 999}

    def test_partial_update(self, api_client, recipe):
        response = api_client.patch(
            f"/api/foodq/recipes/{recipe.pk}/", {"servings": 8}, format="json"
        )

        assert response.status_code == 200
        assert response.data["servings"] == 8
        recipe.refresh_from_db()
        assert recipe.servings == 8

    def test_full_update_replaces_ingredients(self, api_client, recipe):
        response = api_client.put(
            f"/api/foodq/recipes/{recipe.pk}/",
            {"name": "Crepes", "ingredients": [{"name": "Flour"}]},
            format="json",
        )

        assert response.status_code == 200
        assert response.data["name"] == "Crepes"
        assert [i["name"] for i in response.data["ingredients"]] == ["Flour"]

    def test_update_missing(self, api_client):
        response = api_client.patch(
            "/api/foodq/recipes/999/", {"servings": 2}, format="json"
        )
        assert response.status_code == 404

    def test_list_for_cook(self, api_client, cook, recipe):
        RecipeCatalog.save_for_cook(cook.pk, recipe.pk)

        response = api_client.get("/api/foodq/recipes/", {"cook": cook.pk})

        assert response.status_code == 200
        assert [r["id"] for r in response.data] == [recipe.pk]

    def test_list_requires_cook(self, api_client):
        response = api_client.get("/api/foodq/recipes/")

        assert response.status_code == 400
        assert response.data["field"] == "cook"

    def test_save_recipe(self, api_client, cook, recipe):
        response = api_client.post(
            f"/api/foodq/recipes/{recipe.pk}/save/", {"cook": cook.pk}, format="json"
        )

        assert response.status_code == 201
        assert SavedRecipe.objects.filter(cook=cook, recipe=recipe).exists()

    def test_no_delete(self, api_client, recipe):
        response = api_client.delete(f"/api/foodq/recipes/{recipe.pk}/")
        assert response.status_code == 405


# ═══════════════════════════════════════════════════════════════════
# QueueViewSet
# ═══════════════════════════════════════════════════════════════════


class TestQueueAPI:
    def enqueue(self, api_client, queue_id, *recipes):
        for recipe in recipes:
            response = api_client.post(
                queue_url(queue_id, "recipes/"), {"recipe": recipe}, format="json"
            )
            assert response.status_code == 201

    def test_contents_of_new_queue(self, api_client, queue_id):
        response = api_client.get(queue_url(queue_id, "recipes/"))

        assert response.status_code == 200
        assert response.data == []

    def test_enqueue_returns_length(self, api_client, queue_id):
        response = api_client.post(
            queue_url(queue_id, "recipes/"), {"recipe": 5}, format="json"
        )

        assert response.status_code == 201
        assert response.data == {"length": 1}

    def test_enqueue_then_contents(self, api_client, queue_id):
        self.enqueue(api_client, queue_id, 5, 7, 9, 5)

        response = api_client.get(queue_url(queue_id, "recipes/"))
        assert response.data == [5, 7, 9, 5]

    def test_next(self, api_client, queue_id):
        self.enqueue(api_client, queue_id, 5, 7)

        response = api_client.get(queue_url(queue_id, "next/"))

        assert response.status_code == 200
        assert response.data == {"queue": queue_id, "recipe": 5, "empty": False}

    def test_next_on_empty_queue(self, api_client, queue_id):
        response = api_client.get(queue_url(queue_id, "next/"))

        assert response.status_code == 200
        assert response.data["recipe"] is None
        assert response.data["empty"] is True

    def test_dequeue(self, api_client, queue_id):
        self.enqueue(api_client, queue_id, 5, 7, 9)

        response = api_client.delete(queue_url(queue_id, "recipes/7/"))

        assert response.status_code == 204
        assert api_client.get(queue_url(queue_id, "recipes/")).data == [5, 9]

    def test_dequeue_absent(self, api_client, queue_id):
        self.enqueue(api_client, queue_id, 5)

        response = api_client.delete(queue_url(queue_id, "recipes/42/"))

        assert response.status_code == 404
        assert response.data["code"] == "NOT_PRESENT"

    def test_dequeue_non_numeric_recipe(self, api_client, queue_id):
        response = api_client.delete(queue_url(queue_id, "recipes/abc/"))

        assert response.status_code == 400
        assert response.data["code"] == "VALIDATION_ERROR"

    def test_reorder(self, api_client, queue_id):
        self.enqueue(api_client, queue_id, 5, 7, 9)

        response = api_client.post(
            queue_url(queue_id, "order/"), {"recipe": 9, "position": 0}, format="json"
        )

        assert response.status_code == 200
        assert response.data == {"recipes": [9, 5, 7]}

    def test_reorder_invalid_position(self, api_client, queue_id):
        self.enqueue(api_client, queue_id, 5)

        response = api_client.post(
            queue_url(queue_id, "order/"), {"recipe": 5, "position": 3}, format="json"
        )

        assert response.status_code == 422
        assert response.data["code"] == "INVALID_POSITION"
        assert api_client.get(queue_url(queue_id, "recipes/")).data == [5]

    def test_reorder_absent(self, api_client, queue_id):
        response = api_client.post(
            queue_url(queue_id, "order/"), {"recipe": 5, "position": 0}, format="json"
        )

        assert response.status_code == 404
        assert response.data["code"] == "NOT_PRESENT"

    def test_reorder_missing_position(self, api_client, queue_id):
        response = api_client.post(
            queue_url(queue_id, "order/"), {"recipe": 5}, format="json"
        )

        assert response.status_code == 400
        assert "position" in response.data["fields"]

    @pytest.mark.parametrize("payload", [{}, {"recipe": -1}, {"recipe": "five"}])
    def test_enqueue_invalid_payload(self, api_client, queue_id, payload):
        response = api_client.post(queue_url(queue_id, "recipes/"), payload, format="json")

        assert response.status_code == 400
        assert response.data["code"] == "VALIDATION_ERROR"
        assert RecipeQueue.objects.get(pk=queue_id).version == 0

    @pytest.mark.parametrize("bad_id", ["abc", "0"])
    def test_invalid_queue_id(self, api_client, bad_id):
        response = api_client.get(queue_url(bad_id, "recipes/"))

        assert response.status_code == 400
        assert response.data["code"] == "VALIDATION_ERROR"

    def test_unknown_queue(self, api_client, db):
        for response in (
            api_client.get(queue_url(999, "recipes/")),
            api_client.get(queue_url(999, "next/")),
            api_client.post(queue_url(999, "recipes/"), {"recipe": 1}, format="json"),
            api_client.delete(queue_url(999, "recipes/1/")),
        ):
            assert response.status_code == 404
            assert response.data["code"] == "QUEUE_NOT_FOUND"

    def test_storage_fault_is_503(self, api_client, queue_id):
        fault = FoodQError("STORAGE_FAULT", queue=queue_id, operation="replace")

        with patch(
            "foodq.adapters.orm.OrmQueueStore.replace", side_effect=fault
        ):
            response = api_client.post(
                queue_url(queue_id, "recipes/"), {"recipe": 1}, format="json"
            )

        assert response.status_code == 503
        assert response.data["code"] == "STORAGE_FAULT"
        assert RecipeQueue.objects.get(pk=queue_id).entries == []


# ═══════════════════════════════════════════════════════════════════
# Error mapping
# ═══════════════════════════════════════════════════════════════════


class TestErrorStatus:
    @pytest.mark.parametrize(
        "code,expected",
        [
            ("VALIDATION_ERROR", 400),
            ("QUEUE_NOT_FOUND", 404),
            ("NOT_PRESENT", 404),
            ("QUEUE_EXISTS", 409),
            ("INVALID_POSITION", 422),
            ("STORAGE_FAULT", 503),
            ("SOMETHING_ELSE", 500),
        ],
    )
    def test_status_code(self, code, expected):
        assert FoodQError(code).status_code == expected

    def test_as_dict(self):
        error = FoodQError("NOT_PRESENT", queue=3, recipe=42)
        assert error.as_dict() == {"code": "NOT_PRESENT", "queue": 3, "recipe": 42}
        assert str(error) == "FoodQError(NOT_PRESENT: queue=3, recipe=42)"
