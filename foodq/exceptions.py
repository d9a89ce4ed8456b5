"""
FoodQ Exceptions.

One exception type for the whole app; the code says what went wrong and
the keyword details say where.
"""

from typing import Any


# code -> HTTP status used by foodq.api
STATUS_CODES = {
    "VALIDATION_ERROR": 400,  # malformed id or payload, nothing stored
    "QUEUE_NOT_FOUND": 404,
    "NOT_PRESENT": 404,  # recipe not in the queue (or queue empty)
    "COOK_NOT_FOUND": 404,
    "RECIPE_NOT_FOUND": 404,
    "QUEUE_EXISTS": 409,  # one queue per cook
    "INVALID_POSITION": 422,  # target index outside the queue after removal
    "STORAGE_FAULT": 503,  # database error or queue guard timeout
}


class FoodQError(Exception):
    """
    Erro de domínio do FoodQ.

    Usage:
        raise FoodQError("NOT_PRESENT", queue=3, recipe=42)

        try:
            ...
        except FoodQError as e:
            e.code         # "NOT_PRESENT"
            e.details      # {"queue": 3, "recipe": 42}
            e.status_code  # 404
    """

    def __init__(self, code: str, **details: Any):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}" if details else code)

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 500)

    def as_dict(self) -> dict:
        """Error body for API responses: {"code": ..., **details}."""
        return {"code": self.code, **self.details}

    def __str__(self) -> str:
        if not self.details:
            return f"FoodQError({self.code})"
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"FoodQError({self.code}: {details_str})"
