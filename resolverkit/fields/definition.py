"""Field declarations: how one output key is derived from a source object.

A declaration is either a shorthand string ("name") or a FieldDefinition.
Plain dicts with the same keys are accepted wherever a declaration is and are
validated into a FieldDefinition.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class FieldDefinition(BaseModel):
    """Full form of a field declaration.

    - field: name of the output field
    - private: only populated when requested through ``include_private``
    - source: dotted path of the source field; unset means ``field``, an
      explicit None means "build ``nested`` from the parent's source"
    - nested: declarations applied to the resolved value
    - internal: declared (see ``get_source_fields``) but never emitted
    - annotate: free-form metadata for other tooling, ignored here
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    field: str
    private: bool = False
    source: Optional[str] = None
    nested: Optional[List[Union[str, "FieldDefinition"]]] = None
    internal: bool = False
    annotate: Optional[Dict[str, Any]] = None

    @field_validator("nested")
    @classmethod
    def check_nested(cls, value):
        if value is not None:
            if not value:
                raise ValueError("nested must declare at least one field")
            check_unique(value)
        return value

    @model_validator(mode="after")
    def check_null_source(self):
        if self.flattens and self.nested is None:
            raise ValueError(f"field '{self.field}' has source=None but no nested fields")
        return self

    @property
    def flattens(self) -> bool:
        """True when source was explicitly set to None."""
        return "source" in self.model_fields_set and self.source is None

    @property
    def target(self) -> str:
        return self.source if self.source is not None else self.field


FieldDefinition.model_rebuild()


FieldSpec = Union[str, FieldDefinition, Dict[str, Any]]


def to_definition(declaration: FieldSpec) -> FieldDefinition:
    if isinstance(declaration, FieldDefinition):
        return declaration
    if isinstance(declaration, str):
        return FieldDefinition(field=declaration)
    if isinstance(declaration, dict):
        return FieldDefinition.model_validate(declaration)
    raise TypeError(f"Unsupported field declaration: {declaration!r}")


def check_unique(fields: Sequence[FieldSpec]) -> List[FieldDefinition]:
    """Normalize a sibling list, rejecting repeated output names."""
    definitions = [to_definition(f) for f in fields]
    seen = set()
    for d in definitions:
        if d.field in seen:
            raise ValueError(f"duplicate field declaration: {d.field}")
        seen.add(d.field)
    return definitions


def get_source_fields(fields: Sequence[FieldSpec]) -> List[str]:
    """Source names the top-level declarations read from (``nested`` is not visited)."""
    return [to_definition(f).target for f in fields]
