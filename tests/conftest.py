"""
Pytest configuration and shared fixtures for peekjson tests.

Provides immutable test data fixtures describing documents that must parse
and documents that must fail with a particular error kind.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import peekjson

PERSON = """{
    "name": "Ross",
    "age": 21,
    "hobbies": [
      "programming"
    ]
   }"""

PERSON_WITH_OBJECT = """{
    "name": "Ross",
    "age": 21,
    "hobbies": [
      "programming"
    ],
    "pc-build": {
      "processor": "Ryzen 5 5600X",
      "graphics-card": "RX 5700XT",
      "memory": "Corsair Vengeance 16GB",
      "motherboard": "B450 Aorus PRO",
      "storage": "4TB"
    }
   }"""

PERSON_WITH_OBJECT_VALUE = {
    "name": "Ross",
    "age": 21.0,
    "hobbies": ["programming"],
    "pc-build": {
        "processor": "Ryzen 5 5600X",
        "graphics-card": "RX 5700XT",
        "memory": "Corsair Vengeance 16GB",
        "motherboard": "B450 Aorus PRO",
        "storage": "4TB",
    },
}


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_error: type[peekjson.JSONDecodeError] = peekjson.JSONDecodeError


@pytest.fixture
def person_document() -> str:
    return PERSON


@pytest.fixture
def person_with_object_document() -> str:
    return PERSON_WITH_OBJECT


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides documents that must fail, each with the expected error kind.

    Adapted from the json.org JSON_checker failure suite, keeping the cases
    this reader rejects.
    """
    fail_docs: list[tuple[str, type[peekjson.JSONDecodeError]]] = [
        # https://json.org/JSON_checker/test/fail1.json
        (
            '"A JSON payload should be an object or array, not a string."',
            peekjson.InvalidDocumentError,
        ),
        # https://json.org/JSON_checker/test/fail2.json
        ('["Unclosed array"', peekjson.EndOfInputError),
        # https://json.org/JSON_checker/test/fail3.json
        ('{unquoted_key: "keys must be quoted"}', peekjson.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail5.json
        ('["double extra comma",,]', peekjson.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail6.json
        ('[   , "<-- missing value"]', peekjson.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail11.json
        ('{"Illegal expression": 1 + 2}', peekjson.ObjectSeparatorError),
        # https://json.org/JSON_checker/test/fail12.json
        ('{"Illegal invocation": alert()}', peekjson.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail14.json
        ('{"Numbers cannot be hex": 0x14}', peekjson.ObjectSeparatorError),
        # https://json.org/JSON_checker/test/fail16.json
        ("[\\naked]", peekjson.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail19.json
        ('{"Missing colon" null}', peekjson.MissingValueError),
        # https://json.org/JSON_checker/test/fail20.json
        ('{"Double colon":: null}', peekjson.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail21.json
        ('{"Comma instead of colon", null}', peekjson.MissingValueError),
        # https://json.org/JSON_checker/test/fail22.json
        ('["Colon instead of comma": false]', peekjson.ArraySeparatorError),
        # https://json.org/JSON_checker/test/fail23.json
        ('["Bad value", truth]', peekjson.MalformedLiteralError),
        # https://json.org/JSON_checker/test/fail24.json
        ("['single quote']", peekjson.UnexpectedTokenError),
        # https://json.org/JSON_checker/test/fail29.json
        ("[0e]", peekjson.NumberSeparatorError),
        # https://json.org/JSON_checker/test/fail30.json
        ("[0e+]", peekjson.NumberSeparatorError),
        # https://json.org/JSON_checker/test/fail31.json
        ("[0e+-1]", peekjson.NumberSeparatorError),
        # https://json.org/JSON_checker/test/fail32.json
        ('{"Comma instead if closing brace": true,', peekjson.EndOfInputError),
        # https://json.org/JSON_checker/test/fail33.json
        ('["mismatch"}', peekjson.ArraySeparatorError),
    ]

    return [
        JsonTestCase(
            description=f"fail case {idx + 1}",
            input_data=doc,
            should_fail=True,
            expected_error=error,
        )
        for idx, (doc, error) in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides documents that must parse successfully.
    """
    return [
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            expected_output=[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]],
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
            expected_output={
                "JSON Test Pattern pass3": {
                    "The outermost value": "must be an object or array.",
                    "In this test": "It is an object.",
                }
            },
        ),
        JsonTestCase(
            description="person with nested object",
            input_data=PERSON_WITH_OBJECT,
            expected_output=PERSON_WITH_OBJECT_VALUE,
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides every value kind wrapped in a one-element array.
    """
    return [
        JsonTestCase("null value", "[null]", False, [None]),
        JsonTestCase("true boolean", "[true]", False, [True]),
        JsonTestCase("false boolean", "[false]", False, [False]),
        JsonTestCase("integer", "[42]", False, [42.0]),
        JsonTestCase("negative integer", "[-17]", False, [-17.0]),
        JsonTestCase("float", "[3.14]", False, [3.14]),
        JsonTestCase("exponent", "[76.435e6]", False, [7.6435e7]),
        JsonTestCase("negative exponent", "[1.5e-3]", False, [0.0015]),
        JsonTestCase("empty string", '[""]', False, [""]),
        JsonTestCase("simple string", '["hello"]', False, ["hello"]),
        JsonTestCase("empty array", "[[]]", False, [[]]),
        JsonTestCase("empty object", "[{}]", False, [{}]),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1.0, 2.0, 3.0]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
    ]
