"""Project a source object through a list of field declarations."""

from typing import Any, Collection, Dict, Sequence, Union

from resolverkit.fields.definition import FieldSpec, check_unique
from resolverkit.utils.paths import MISSING, get_value


IncludePrivate = Union[bool, Collection[str]]


class MissingSourceFieldError(ValueError):
    """A required field is absent from the source object."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Cannot format output, missing source field: {path}")


def _wants_private(qualified: str, include_private: IncludePrivate) -> bool:
    if include_private is True:
        return True
    if not include_private:
        return False
    if isinstance(include_private, str):
        return qualified == include_private
    return qualified in include_private


def format_output(
    source: Any,
    fields: Sequence[FieldSpec],
    include_private: IncludePrivate = False,
    path_prefix: str = "",
) -> Dict[str, Any]:
    """Build a new dict from ``source`` following ``fields`` in order.

    - internal fields are never emitted
    - private fields are emitted when ``include_private`` is True or lists the
      field's qualified path (e.g. "location.zipcode")
    - a field with source=None builds its ``nested`` fields from ``source``
      itself instead of reading a sub-object

    Output keys are the declared ``field`` names. Raises
    MissingSourceFieldError when a required value is absent; ``source`` is
    never modified.
    """
    prefix = f"{path_prefix}." if path_prefix else ""
    output: Dict[str, Any] = {}

    for definition in check_unique(fields):
        if definition.internal:
            continue
        if definition.private and not _wants_private(prefix + definition.field, include_private):
            continue

        target = definition.target
        if definition.flattens:
            value = source
        else:
            value = get_value(source, target)
            if value is MISSING:
                raise MissingSourceFieldError(prefix + target)

        if definition.nested is not None:
            value = format_output(
                value,
                definition.nested,
                include_private=include_private,
                path_prefix=prefix + target,
            )

        output[definition.field] = value

    return output
