"""Generic list controller for CRUD screens."""

from __future__ import annotations

from sistema_buses.controller.errors import (
    AlreadyOpen,
    ControllerError,
    DeleteFailed,
    LoadFailed,
    ModalNotOpen,
    NotFound,
    SubmitFailed,
)
from sistema_buses.controller.list_controller import (
    ModalMode,
    ModalSession,
    ResourceListController,
    ResourceOperations,
)
from sistema_buses.controller.search import filter_records, substring_matcher

__all__ = [
    "AlreadyOpen",
    "ControllerError",
    "DeleteFailed",
    "LoadFailed",
    "ModalMode",
    "ModalNotOpen",
    "ModalSession",
    "NotFound",
    "ResourceListController",
    "ResourceOperations",
    "SubmitFailed",
    "filter_records",
    "substring_matcher",
]
