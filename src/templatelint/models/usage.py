"""Why an id or class name counts as referenced."""

from __future__ import annotations

from enum import StrEnum


class UsageOrigin(StrEnum):
    CONTROLLER = "controller"
    AMBIENT = "ambient"
    LABEL = "label"
