"""
Test data generators for JSON benchmarks.

Produces documents of different shapes, restricted to the escapes tagjson
decodes, so every library sees the same logical content.
"""

import json
import random
import string
from typing import Any

_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\n", "\\r", "\\t"]

DATA_TYPES = [
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def _generate_small_object() -> str:
    """Generates a small object with one nested member."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_large_object() -> str:
    """Generates an object with a few hundred records."""
    data = {
        "account": {"id": random.randint(1000000, 9999999), "tier": "gold"},
        "events": [
            {
                "id": f"evt_{i:06d}",
                "amount": round(random.uniform(1.0, 1000.0), 2),
                "kind": random.choice(["credit", "debit", "refund"]),
                "note": _random_string(24),
                "settled": random.choice([True, False, None]),
            }
            for i in range(300)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array() -> str:
    """Generates a flat array mixing every scalar kind."""
    choices: list[Any] = []
    for i in range(500):
        pick = i % 5
        if pick == 0:
            choices.append(random.randint(-1000, 1000))
        elif pick == 1:
            choices.append(round(random.uniform(-100.0, 100.0), 3))
        elif pick == 2:
            choices.append(_random_string(random.randint(5, 30)))
        elif pick == 3:
            choices.append(random.choice([True, False]))
        else:
            choices.append(None)
    return json.dumps(choices)


def _generate_nested_structure() -> str:
    """Generates a tree six levels deep with fan-out three."""

    def node(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"leaf": _random_string(10)}
        return {"level": depth, "children": [node(depth - 1) for _ in range(3)]}

    return json.dumps(node(6))


def _generate_string_heavy() -> str:
    """Generates strings where roughly a third of the characters are escapes."""

    def escaped_string() -> str:
        return "".join(
            random.choice(_ESCAPES)
            if random.random() < _ESCAPE_PROBABILITY
            else random.choice(string.ascii_letters + " ")
            for _ in range(60)
        )

    fields = ",".join(f'"key_{i}": "{escaped_string()}"' for i in range(200))
    return "{" + fields + "}"


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
