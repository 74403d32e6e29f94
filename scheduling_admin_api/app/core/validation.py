"""
Validation entry points for untrusted request bodies.

Each function takes the decoded JSON body (any Python value) and
returns the accepted, normalized model, or raises ``ValidationFailed``
carrying every field‑level issue found.  Nothing here touches the
database; the same input always gives the same result.
"""

from typing import Any, List

from pydantic import TypeAdapter, ValidationError

from scheduling_admin_api.app.core.errors import ValidationFailed, issues_from_errors
from scheduling_admin_api.app.schemas.availability import AvailabilityCreate
from scheduling_admin_api.app.schemas.profile import ProfileUpdate
from scheduling_admin_api.app.schemas.service import ServiceCreate

_availability_list = TypeAdapter(List[AvailabilityCreate])


def validate_profile(data: Any) -> ProfileUpdate:
    """Validate a profile body; ``business_name`` comes back trimmed."""
    try:
        return ProfileUpdate.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed(issues_from_errors(exc.errors())) from exc


def validate_service(data: Any) -> ServiceCreate:
    """Validate a service body, reporting name and duration issues together."""
    try:
        return ServiceCreate.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailed(issues_from_errors(exc.errors())) from exc


def validate_availabilities(data: Any) -> List[AvailabilityCreate]:
    """Validate a full availability set.

    ``data`` is the value of the ``availabilities`` key.  An empty list
    is valid.  Entries are checked independently; there is no check for
    overlapping windows or repeated weekdays.
    """
    try:
        return _availability_list.validate_python(data)
    except ValidationError as exc:
        raise ValidationFailed(issues_from_errors(exc.errors(), prefix=("availabilities",))) from exc


def validate_availability_body(body: Any) -> List[AvailabilityCreate]:
    """Validate a ``{"availabilities": [...]}`` request body."""
    if not isinstance(body, dict):
        raise ValidationFailed([{"field": "body", "message": "Input should be an object"}])
    if "availabilities" not in body:
        raise ValidationFailed([{"field": "availabilities", "message": "Field required"}])
    return validate_availabilities(body["availabilities"])
