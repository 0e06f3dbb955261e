"""Tests for the merged top-level namespace."""

import uuid as stdlib_uuid

import rrutils


class TestNamespace:
    """The package exposes library references and helpers together."""

    def test_library_references(self):
        import httpx
        import jinja2
        import jwt
        import pydantic
        import xmltodict

        assert rrutils.httpx is httpx
        assert rrutils.jwt is jwt
        assert rrutils.jsonwebtoken is jwt
        assert rrutils.jinja2 is jinja2
        assert rrutils.pydantic is pydantic
        assert rrutils.xmltodict is xmltodict

    def test_uuid_is_time_based(self):
        assert rrutils.uuid().version == 1
        assert isinstance(rrutils.uuid(), stdlib_uuid.UUID)

    def test_everything_in_all_is_exported(self):
        for name in rrutils.__all__:
            assert hasattr(rrutils, name), name

    def test_debug_flag_matches_settings(self):
        assert rrutils.DEBUG is rrutils.Config.DEBUG

    def test_jwt_round_trip_through_namespace(self):
        token = rrutils.jwt.encode({"sub": "user-1"}, "a-test-signing-secret-of-32-bytes", algorithm="HS256")
        assert rrutils.jwt.decode(token, "a-test-signing-secret-of-32-bytes", algorithms=["HS256"]) == {"sub": "user-1"}

    def test_template_and_schema(self):
        class Order(rrutils.BaseModel):
            total: float

        order = Order(total="9.5")
        assert rrutils.Template("total={{ total }}").render(total=order.total) == "total=9.5"

    def test_collection_helpers(self):
        import collections
        import functools
        import itertools
        import operator

        assert rrutils.collections is collections
        assert rrutils.functools is functools
        assert rrutils.itertools is itertools
        assert rrutils.operator is operator
        counts = rrutils.collections.Counter(rrutils.itertools.chain("ab", "b"))
        assert rrutils.functools.reduce(rrutils.operator.add, counts.values()) == 3
