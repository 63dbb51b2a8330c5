"""Sample person record and field set used by the demo route and tests."""

from typing import Any, Dict, List

from resolverkit.fields.definition import FieldSpec, get_source_fields
from resolverkit.fields.format import format_output
from resolverkit.obs.context import ResolverContext
from resolverkit.resolvers.resolver import resolver


PERSON_FIELDS: List[FieldSpec] = [
    "name",
    "age",
    {"field": "email", "private": True},
    {
        "field": "location",
        "nested": [
            "city",
            "state",
            {"field": "zipcode", "source": "zip", "private": True},
            {"field": "country", "internal": True},
        ],
    },
    {"field": "favorite_bar", "internal": True},
]

SAMPLE_PERSON: Dict[str, Any] = {
    "name": "test",
    "age": 22,
    "email": "test@test.com",
    "location": {
        "city": "Denver",
        "state": "CO",
        "zip": "12345",
        "country": "USA",
    },
    "favorite_bar": "Smelly's",
}


@resolver("person")
def fetch_person(args: Dict[str, Any], context: ResolverContext) -> Dict[str, Any]:
    # Only the declared source fields are handed to the formatter
    return {key: SAMPLE_PERSON[key] for key in get_source_fields(PERSON_FIELDS)}


def shape_person(data: Dict[str, Any], args: Dict[str, Any], context: ResolverContext) -> Dict[str, Any]:
    return format_output(data, PERSON_FIELDS, include_private=args.get("include_private", False))


person = fetch_person.with_transform(shape_person)
