# product_service/validation.py

"""
Validation of incoming product payloads.

`validate_product` is called by the request handlers before the repository is
touched, so an invalid payload never reaches the database. Presence and length
rules on `name` and `price` are checked first with their fixed messages; type
problems reported by the `ProductPayload` schema are appended for the fields
that passed those checks.
"""

from typing import Any, List, Mapping

from pydantic import ValidationError

from .exceptions import ProductValidationError
from .models import NAME_MAX_LENGTH
from .schemas import FieldError, ProductPayload

NAME_MANDATORY = "Name is mandatory"
NAME_TOO_LONG = f"Name should not exceed {NAME_MAX_LENGTH} characters"
PRICE_MANDATORY = "Price is mandatory"


def _check_required_fields(payload: Mapping[str, Any]) -> List[FieldError]:
    errors = []

    name = payload.get("name")
    if name is None or (isinstance(name, str) and not name.strip()):
        errors.append(FieldError(field="name", message=NAME_MANDATORY))
    elif isinstance(name, str) and len(name) > NAME_MAX_LENGTH:
        errors.append(FieldError(field="name", message=NAME_TOO_LONG))

    if payload.get("price") is None:
        errors.append(FieldError(field="price", message=PRICE_MANDATORY))

    return errors


def validate_product(payload: Mapping[str, Any]) -> ProductPayload:
    """
    Checks a raw product payload and returns it as a `ProductPayload`.

    Raises `ProductValidationError` carrying every violated field constraint.
    """
    if not isinstance(payload, Mapping):
        raise ProductValidationError(
            [FieldError(field="body", message="Request body must be a JSON object")]
        )

    errors = _check_required_fields(payload)
    reported = {error.field for error in errors}

    try:
        product = ProductPayload.model_validate(dict(payload))
    except ValidationError as exc:
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "body"
            if field.split(".")[0] in reported:
                continue
            errors.append(FieldError(field=field, message=err["msg"]))
            reported.add(field)
        product = None

    if errors:
        raise ProductValidationError(errors)
    return product
