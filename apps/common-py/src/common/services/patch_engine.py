"""Applies JSON Patch operations to a user working copy."""

import logging
from collections.abc import Sequence

import jsonpatch
import jsonpointer

from common.exceptions import MalformedPatchError
from common.models.patch import PatchOperation
from common.models.user import UpdateUserDto

logger = logging.getLogger(__name__)

_VALUE_OPS = {"add", "replace", "test"}


def _patchable_fields() -> dict[str, str]:
    """Map lower-cased wire names (``firstname``) to model attributes."""
    fields = {}
    for attribute, field in UpdateUserDto.model_fields.items():
        fields[(field.alias or attribute).lower()] = attribute
    return fields


PATCHABLE_FIELDS = _patchable_fields()


def resolve_path(path: str) -> str:
    """Turn a JSON pointer such as ``/firstName`` into a model attribute.

    Property names are matched without regard to case. Only top-level
    pointers naming a known field resolve.

    Raises:
        MalformedPatchError: If the pointer is empty, nested or unknown
    """
    if not path.startswith("/"):
        raise MalformedPatchError(f"Path '{path}' is not a JSON pointer.")
    segments = path[1:].split("/")
    if len(segments) != 1 or not segments[0]:
        raise MalformedPatchError(f"Path '{path}' does not name a user field.")
    name = segments[0].replace("~1", "/").replace("~0", "~")
    attribute = PATCHABLE_FIELDS.get(name.lower())
    if attribute is None:
        raise MalformedPatchError(f"The target location specified by path '{path}' was not found.")
    return attribute


def _canonical_operation(operation: PatchOperation) -> dict:
    """Rewrite an operation onto the field's wire name, checking its value."""
    attribute = resolve_path(operation.path)
    wire_name = UpdateUserDto.model_fields[attribute].alias or attribute
    canonical = {"op": operation.op, "path": f"/{wire_name}"}

    if operation.op in _VALUE_OPS:
        if not operation.has_value:
            raise MalformedPatchError(f"The '{operation.op}' operation at '{operation.path}' requires a value.")
        if operation.value is not None and not isinstance(operation.value, str):
            raise MalformedPatchError(f"The value for '{operation.path}' must be a string or null.")
        canonical["value"] = operation.value
    return canonical


def apply_patch(document: UpdateUserDto, operations: Sequence[PatchOperation]) -> UpdateUserDto:
    """Apply ``operations`` in order to a copy of ``document``.

    The input document is never modified. Either every operation applies
    and the patched copy is returned, or the first failure is raised. A
    removed field comes back as null.

    Args:
        document: Current field values of the user being patched
        operations: Ordered patch operations

    Returns:
        Patched working copy

    Raises:
        MalformedPatchError: If an operation targets an unknown field, lacks
            a usable value, or the patch cannot be applied (including a
            ``test`` operation that does not match)
    """
    canonical = []
    for index, operation in enumerate(operations):
        try:
            canonical.append(_canonical_operation(operation))
        except MalformedPatchError as e:
            logger.debug("Rejected patch operation %d (%s %s): %s", index, operation.op, operation.path, e)
            raise MalformedPatchError(str(e), index=index) from e

    try:
        patched = jsonpatch.JsonPatch(canonical).apply(document.model_dump(by_alias=True))
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as e:
        logger.debug("Patch could not be applied: %s", e)
        raise MalformedPatchError(str(e)) from e

    return UpdateUserDto.model_validate(patched)
