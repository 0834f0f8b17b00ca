"""
Tests for building request values from JSON bodies and typed data.
"""

from dataclasses import dataclass, field
from typing import Optional

import pytest
from pydantic import BaseModel, Field

from fieldrules import ConfigurationError, RequestDecodeError
from fieldrules.core.request import request_from_data, request_from_json


@dataclass
class User:
    name: str = field(metadata={"json": "name", "form": "full_name"})
    zip_code: str = field(metadata={"json": "zip"})
    password: str = field(default="", metadata={"json": "-"})
    age: Optional[int] = None


class Signup(BaseModel):
    name: str
    zip_code: str = Field(alias="zip")


def test_request_from_json_object():
    assert request_from_json('{"zip": "8233", "age": 1}') == {"zip": "8233", "age": 1}
    assert request_from_json(b'{"active": null}') == {"active": None}


@pytest.mark.parametrize("body", ["{not json", "[1, 2]", "3", b"\xff\xfe"])
def test_request_from_json_rejects_non_objects(body):
    with pytest.raises(RequestDecodeError):
        request_from_json(body)


def test_request_from_mapping_is_copied():
    data = {"zip": "8233"}
    request = request_from_data(data)

    assert request == data
    assert request is not data


def test_request_from_dataclass_uses_tag_identifier():
    user = User(name="John", zip_code="8233", password="secret")

    assert request_from_data(user, "json") == {"name": "John", "zip": "8233", "age": None}
    assert request_from_data(user, "form") == {
        "full_name": "John",
        "zip_code": "8233",
        "password": "secret",
        "age": None,
    }


def test_request_from_pydantic_model():
    signup = Signup(name="John", zip="8233")

    assert request_from_data(signup, "json") == {"name": "John", "zip": "8233"}
    assert request_from_data(signup, "name") == {"name": "John", "zip_code": "8233"}


def test_request_from_unsupported_type():
    with pytest.raises(ConfigurationError):
        request_from_data(["zip", "8233"])
