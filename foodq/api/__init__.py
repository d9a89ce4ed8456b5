"""
FoodQ REST API.

Provides DRF ViewSets for:
- Cook and queue onboarding (internal)
- Recipe (create, read, update, saved recipes)
- Queue (contents, next, enqueue, dequeue, reorder)
"""
