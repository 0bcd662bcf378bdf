"""Domain service: order form validation.

Required fields are checked before the email format, so a customer who
left the name empty and typed a bad email hears about the name first.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from storefront.domain.exceptions import (
    InvalidEmailError,
    InvalidSizeError,
    MissingFieldsError,
)

if TYPE_CHECKING:
    from storefront.domain.model.order import OrderForm

REQUIRED_FIELDS = ("name", "phone", "address", "size")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


def validate_order_form(form: OrderForm, sizes: Sequence[str] = ()) -> None:
    """Raise MissingFieldsError, InvalidSizeError or InvalidEmailError.

    Email is optional. Phone and address only need to be non-empty.
    With no *sizes* any non-empty size is accepted.
    """
    missing = frozenset(
        name for name in REQUIRED_FIELDS if not getattr(form, name).strip()
    )
    if missing:
        raise MissingFieldsError(missing)

    size = form.size.strip()
    if sizes and size not in sizes:
        raise InvalidSizeError(size, tuple(sizes))

    email = form.email.strip()
    if email and not is_valid_email(email):
        raise InvalidEmailError(email)
