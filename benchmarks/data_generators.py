"""
Test data generators for parsing benchmarks.

Every generated document is an object or array whose numbers are integers or
plain decimals, so all compared parsers accept the same inputs.
"""

import json
import random
import string
from typing import Any

DATA_TYPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "number_heavy",
    "string_heavy",
)

_ESCAPE_PROBABILITY = 0.3


def generate_test_data(data_type: str, seed: int = 0) -> str:
    """Generates a JSON document of the given kind."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "number_heavy": _generate_number_heavy,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return json.dumps(generators[data_type](random.Random(seed)))


def _generate_small_object(rng: random.Random) -> dict[str, Any]:
    return {
        "name": "Ross",
        "age": 21,
        "hobbies": ["programming", "climbing"],
        "balance": 1234.56,
        "active": True,
        "manager": None,
    }


def _generate_large_object(rng: random.Random) -> dict[str, Any]:
    """A profile with a purchase history (> 10KB)."""
    return {
        "user_id": rng.randint(1000000, 9999999),
        "pc-build": {
            "processor": "Ryzen 5 5600X",
            "graphics-card": "RX 5700XT",
            "memory": "Corsair Vengeance 16GB",
            "storage": f"{rng.randint(1, 8)}TB",
        },
        "orders": [
            {
                "id": f"ord_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "note": _random_string(rng, 24),
                "shipped": rng.choice([True, False]),
            }
            for i in range(80)
        ],
    }


def _generate_mixed_array(rng: random.Random) -> list[Any]:
    choices = [
        lambda: rng.randint(-1000, 1000),
        lambda: round(rng.uniform(-100.0, 100.0), 3),
        lambda: _random_string(rng, rng.randint(5, 30)),
        lambda: rng.choice([True, False]),
        lambda: None,
        lambda: {"value": _random_string(rng, 10), "score": rng.randint(0, 100)},
    ]
    return [rng.choice(choices)() for _ in range(200)]


def _generate_nested_structure(rng: random.Random) -> dict[str, Any]:
    def create(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}
        return {
            "level": depth,
            "items": [create(depth - 1) for _ in range(3)],
            "nested": create(depth - 1),
        }

    return create(7)


def _generate_number_heavy(rng: random.Random) -> dict[str, Any]:
    return {
        "integers": [rng.randint(-(10**9), 10**9) for _ in range(300)],
        "decimals": [round(rng.uniform(-1e6, 1e6), 4) for _ in range(300)],
    }


def _generate_string_heavy(rng: random.Random) -> dict[str, Any]:
    """Strings with backslash escapes, which peekjson copies through."""

    def escaped() -> str:
        return "".join(
            rng.choice('"\\/\b\f\n\r\t')
            if rng.random() < _ESCAPE_PROBABILITY
            else rng.choice(string.ascii_letters + " ")
            for _ in range(50)
        )

    return {f"key_{i}": escaped() for i in range(200)}


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
