"""
Greeting Model
==============

Aggregate root of the greetings feature.
This is a pure domain object with no infrastructure dependencies.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Union

from onion_app.features.greetings.domain.value_objects import MessageText, PersonName
from onion_app.utils.datetime_utils import ensure_utc, utc_now


@dataclass(frozen=True)
class Greeting:
    """
    Greeting domain model.

    Immutable once built. There are exactly two ways to obtain one:
    - create_new(): a brand new greeting (fresh id, default message, current time)
    - reconstruct(): a greeting read back from storage
    """
    id: uuid.UUID
    name: PersonName
    message: MessageText
    created_at: datetime

    @classmethod
    def create_new(cls, name: PersonName) -> "Greeting":
        """
        Create a new greeting for a validated name.

        Args:
            name: Validated person name

        Returns:
            Greeting with a fresh id, the default message and a UTC timestamp
        """
        if not isinstance(name, PersonName):
            raise TypeError("name must be a PersonName")

        return cls(
            id=uuid.uuid4(),
            name=name,
            message=MessageText.default_for(name),
            created_at=utc_now(),
        )

    @classmethod
    def reconstruct(
        cls,
        id: Union[uuid.UUID, str],
        name: PersonName,
        message: MessageText,
        created_at: datetime,
    ) -> "Greeting":
        """
        Rebuild a greeting from a stored record.

        For repository adapters only. Nothing is derived or regenerated;
        only structural types are coerced (string ids, naive UTC timestamps).
        """
        if not isinstance(name, PersonName) or not isinstance(message, MessageText):
            raise TypeError("name and message must be value objects")

        return cls(
            id=id if isinstance(id, uuid.UUID) else uuid.UUID(str(id)),
            name=name,
            message=message,
            created_at=ensure_utc(created_at),
        )
