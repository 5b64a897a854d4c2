"""
Built-in sample document.

Covers every node kind: nested objects, arrays of primitives, arrays of
objects, booleans and null.
"""

import json

SAMPLE_DOCUMENT = {
    "user": {
        "name": "John Doe",
        "email": "john@example.com",
        "age": 30,
        "address": {
            "street": "123 Main St",
            "city": "New York",
            "country": "USA",
        },
        "hobbies": ["reading", "coding", "gaming"],
    },
    "items": [
        {"id": 1, "name": "Laptop", "price": 999.99},
        {"id": 2, "name": "Mouse", "price": 29.99},
    ],
    "active": True,
    "metadata": None,
}


def sample_text(indent: int = 2) -> str:
    """The sample document as JSON text, the way a user would paste it."""
    return json.dumps(SAMPLE_DOCUMENT, indent=indent)
