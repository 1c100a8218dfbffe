"""
Schema validation for tool arguments and payloads.

Tool schemas are pydantic models. ``collect_violations`` turns a pydantic
failure into a flat list of violations that the registry can log and return
to the caller without leaking pydantic internals.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .helpers import InvalidInput, UpstreamError

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Violation:
  field: str
  message: str
  kind: str

  def __str__(self) -> str:
    return f"{self.field}: {self.message}" if self.field else self.message


def _violations_from(exc: ValidationError) -> list[Violation]:
  violations = []
  for err in exc.errors(include_url=False):
    loc = ".".join(str(part) for part in err.get("loc", ()))
    violations.append(Violation(field=loc, message=err.get("msg", ""), kind=err.get("type", "")))
  return violations


def collect_violations(schema: type[BaseModel], payload: Any) -> list[Violation]:
  """Return every way ``payload`` fails ``schema``. Empty means valid."""
  try:
    schema.model_validate(payload)
  except ValidationError as exc:
    return _violations_from(exc)
  return []


def describe(violations: list[Violation]) -> str:
  return "; ".join(str(v) for v in violations)


def validate_input(schema: type[ModelT], params: Any) -> ModelT:
  """Parse tool arguments, raising InvalidInput with the violation list."""
  if not isinstance(params, dict):
    raise InvalidInput(
      "Arguments must be an object",
      data={"violations": [asdict(Violation("", "Arguments must be an object", "dict_type"))]},
    )
  try:
    return schema.model_validate(params)
  except ValidationError as exc:
    violations = _violations_from(exc)
    raise InvalidInput(
      f"Invalid arguments: {describe(violations)}",
      data={"violations": [asdict(v) for v in violations]},
    ) from None


def validate_output(schema: type[BaseModel] | None, payload: Any) -> None:
  """Check a delegate payload against a declared output schema.

  A ``None`` schema accepts any shape.
  """
  if schema is None:
    return
  violations = collect_violations(schema, payload)
  if violations:
    raise UpstreamError(
      f"Unexpected response shape: {describe(violations)}",
      data={"violations": [asdict(v) for v in violations]},
    )


def require_field(condition: bool, field: str, message: str) -> None:
  """Cross-field rule helper: raise InvalidInput for ``field`` unless ``condition``."""
  if not condition:
    violation = Violation(field=field, message=message, kind="missing")
    raise InvalidInput(message, data={"violations": [asdict(violation)]})
