"""
Tests for the stitched GraphQL schema
"""

import pytest
import strawberry
from graphql import parse_value, print_schema

from lodging_gateway.gateway import ROOT_FIELDS, Entity, Operation
from lodging_gateway.graphql.errors import SchemaBuildError
from lodging_gateway.graphql.mutations.root import MUTATION_FRAGMENTS
from lodging_gateway.graphql.queries.root import QUERY_FRAGMENTS
from lodging_gateway.graphql.resolvers.rest import from_payload
from lodging_gateway.graphql.scalars import JSON
from lodging_gateway.graphql.schema import (
    TYPE_DEFS,
    build_schema,
    merge_schemas,
    validate_schema,
)
from lodging_gateway.graphql.types import Role


@pytest.fixture(scope="module")
def schema():
    return build_schema()


@pytest.fixture(scope="module")
def sdl(schema) -> str:
    return print_schema(schema._schema)


def test_schema_validates(schema):
    validate_schema(schema)


def test_json_scalar_is_registered(schema, sdl):
    assert schema._schema.get_type("JSON") is JSON
    assert "scalar JSON" in sdl


@pytest.mark.parametrize(
    "line",
    [
        "allUsers: [User]!",
        "userById(id: Int!): User!",
        "allLodging_image: [Lodging_image]!",
        "lodging_imageById(lodging_image_id: Int!): Lodging_image!",
        "locationById(location_id: Int!): Location!",
        "createUser(user: UserInput!): User!",
        "deleteUser(id: Int!): Int\n",
        "updateLodging(lodging_id: Int!, lodging: LodgingInput!): Lodging!",
        "deleteReservation(id: Int!): Int\n",
    ],
)
def test_root_fields_keep_their_names(sdl, line):
    assert line in sdl


def test_entity_fields_are_not_camel_cased(sdl):
    assert "price_per_person_and_nigth: Float!" in sdl
    assert "is_cancel: Boolean!" in sdl
    assert "pricePerPersonAndNigth" not in sdl


@pytest.mark.parametrize(
    "type_name, id_field",
    [
        ("User", "id"),
        ("Role", "id"),
        ("Location", "location_id"),
        ("Lodging_image", "lodging_image_id"),
        ("Lodging", "lodging_id"),
        ("Reservation", "reservation_id"),
    ],
)
def test_input_mirrors_output_without_identifier(schema, type_name, id_field):
    output_type = schema._schema.get_type(type_name)
    input_type = schema._schema.get_type(f"{type_name}Input")

    assert set(input_type.fields) == set(output_type.fields) - {id_field}


def test_every_entity_operation_has_a_root_field(schema):
    for entity in Entity:
        for operation in Operation:
            root, field_name = ROOT_FIELDS[(entity, operation)]
            root_type = getattr(schema._schema, f"{root.lower()}_type")
            assert field_name in root_type.fields


def test_colliding_query_fields_fail_the_build():
    @strawberry.type
    class ShadowUserQuery:
        @strawberry.field(name="allUsers")
        def all_users(self) -> list[int]:
            return []

    with pytest.raises(SchemaBuildError, match="allUsers"):
        merge_schemas(TYPE_DEFS, (*QUERY_FRAGMENTS, ShadowUserQuery), MUTATION_FRAGMENTS)


def test_colliding_mutation_fields_fail_the_build():
    with pytest.raises(SchemaBuildError, match="createRole"):
        merge_schemas(TYPE_DEFS, QUERY_FRAGMENTS, (*MUTATION_FRAGMENTS, MUTATION_FRAGMENTS[1]))


def test_missing_fragment_fails_validation():
    partial = merge_schemas(TYPE_DEFS, QUERY_FRAGMENTS[1:], MUTATION_FRAGMENTS)

    with pytest.raises(SchemaBuildError, match="Query.allUsers missing"):
        validate_schema(partial)


def test_no_query_fragments_is_an_error():
    with pytest.raises(SchemaBuildError):
        merge_schemas(TYPE_DEFS, (), MUTATION_FRAGMENTS)


class TestJsonScalar:
    def test_serialize_and_parse_value_are_identity(self):
        value = {"a": [1, "x", None]}

        assert JSON.serialize(value) is value
        assert JSON.parse_value(value) is value

    def test_parse_literal_returns_plain_value(self):
        node = parse_value('{a: [1, "x", true], b: null}')

        assert JSON.parse_literal(node) == {"a": [1, "x", True], "b": None}


class TestFromPayload:
    def test_projects_declared_fields_only(self):
        role = from_payload(Role, {"id": 1, "namerole": "admin", "created_at": "2024-01-01"})

        assert role == Role(id=1, namerole="admin")

    def test_lists_are_projected_element_wise(self):
        roles = from_payload(Role, [{"id": 1, "namerole": "admin"}, None])

        assert roles == [Role(id=1, namerole="admin"), None]

    def test_scalars_pass_through(self):
        assert from_payload(Role, 1) == 1
        assert from_payload(Role, None) is None
