"""Violation Formatting — turns field-level validation errors into one readable message.

Invariants:
    - Order of violations is preserved (schema field order)
    - A violation with an empty path is rendered without the "path: " prefix
"""


def to_violations(errors: list[dict]) -> list[dict]:
    """Reduce pydantic-style error dicts to ordered {field, message} pairs."""
    return [
        {
            "field": ".".join(str(loc) for loc in e.get("loc", ())),
            "message": e["msg"],
        }
        for e in errors
    ]


def format_violations(violations: list[dict]) -> str:
    """Build "Validation failed: name: ..., email: ..." from violations."""
    parts = [
        f"{v['field']}: {v['message']}" if v["field"] else v["message"]
        for v in violations
    ]
    return f"Validation failed: {', '.join(parts)}"
