"""Entity validation collaborator.

Validation collects every violation before reporting; it never stops at
the first one.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from commentary.domain.model.thread import Thread
from commentary.domain.value import ConstraintViolation, Permalink, ValidationRuleset


class Validator(ABC):
    """Validates an entity against a named ruleset."""

    @abstractmethod
    def validate(
        self, entity: Any, ruleset: ValidationRuleset
    ) -> list[ConstraintViolation]:
        """Return all violations (empty list when valid)."""
        pass


class NewThreadCandidate(BaseModel):
    """Constraints a thread must satisfy before it is first saved."""

    id: str = Field(min_length=1, max_length=255)
    permalink: Permalink

    @field_validator("id")
    @classmethod
    def validate_id_not_blank(cls, v: str) -> str:
        """Validate thread id is not only whitespace."""
        if not v.strip():
            raise ValueError("Thread id must not be blank")
        return v


class PydanticThreadValidator(Validator):
    """Validator backed by pydantic models, one per ruleset."""

    rulesets: dict[ValidationRuleset, type[BaseModel]] = {
        ValidationRuleset.NEW_THREAD: NewThreadCandidate,
    }

    def validate(
        self, entity: Any, ruleset: ValidationRuleset
    ) -> list[ConstraintViolation]:
        if not isinstance(entity, Thread):
            raise TypeError(f"Cannot validate {type(entity).__name__} as a thread")

        model = self.rulesets[ruleset]
        try:
            model.model_validate({"id": entity.id, "permalink": entity.permalink})
        except PydanticValidationError as e:
            return [
                ConstraintViolation(
                    property_path=".".join(
                        str(part) for part in err["loc"] if part != "root"
                    ),
                    message=err["msg"],
                    invalid_value=None if err["input"] is None else str(err["input"]),
                )
                for err in e.errors()
            ]
        return []
