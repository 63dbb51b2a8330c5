"""Declarative output shaping and timed resolvers for small API services."""

from resolverkit.fields.definition import FieldDefinition, get_source_fields
from resolverkit.fields.format import MissingSourceFieldError, format_output
from resolverkit.obs.context import ResolverContext, make_context
from resolverkit.resolvers.resolver import Resolver, resolver, with_transform

__all__ = [
    "FieldDefinition",
    "MissingSourceFieldError",
    "Resolver",
    "ResolverContext",
    "format_output",
    "get_source_fields",
    "make_context",
    "resolver",
    "with_transform",
]
