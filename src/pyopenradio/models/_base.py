"""Base model and enum for pyopenradio records.

Every persisted record inherits from :class:`OpenRadioBaseModel` which
provides:

* ``alias_generator=to_camel`` so camelCase wire keys map
  automatically to snake_case fields.
* A ``model_validator(mode="before")`` that drops ``None`` on declared
  fields so the field default is used.
* ``extra="allow"`` so attributes the library does not know about are
  carried through a load/store cycle untouched.

Enums inherit from :class:`OpenRadioEnum` which adds an ``UNKNOWN``
member at ``-1`` and a ``_missing_`` hook that returns ``UNKNOWN``
for any value without a mapped member.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class OpenRadioEnum(enum.IntEnum):
    """Base for integer code enums.

    Every subclass **must** define ``UNKNOWN = -1``.
    Values without a mapped member resolve to ``UNKNOWN`` instead of
    raising ``ValueError``.
    """

    @classmethod
    def _missing_(cls, value: object) -> OpenRadioEnum:
        if hasattr(cls, "UNKNOWN"):
            unknown: OpenRadioEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class OpenRadioBaseModel(BaseModel):
    """Base for persisted records."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_none_fields(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        declared = set(cls.model_fields) | {to_camel(name) for name in cls.model_fields}
        # Extra attributes are kept as given, None included.
        return {key: value for key, value in values.items() if value is not None or key not in declared}

    def to_wire(self) -> dict[str, Any]:
        """Return the camelCase dict used for persistence.

        Declared fields holding ``None`` are omitted; extra attributes are
        always kept.
        """
        extras = self.model_extra or {}
        data = self.model_dump(by_alias=True)
        return {key: value for key, value in data.items() if value is not None or key in extras}
