"""Per-call validation options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ValidationOptions(BaseModel):
    """Auxiliary sources scanned for literal id/class references.

    Neither source is executed; both are only pattern-matched.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    controller_source: str = Field("", alias="controllerSource")
    ambient_source: str = Field("", alias="ambientSource")
