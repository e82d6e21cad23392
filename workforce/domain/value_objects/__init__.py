"""Domain value objects."""

from workforce.domain.value_objects.core import (
    DateWindow,
    Reference,
    coerce_enum,
    validate_positive_id,
)

__all__ = ["DateWindow", "Reference", "coerce_enum", "validate_positive_id"]
