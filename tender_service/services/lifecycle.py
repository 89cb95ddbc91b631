"""
Shared mechanics of the tender and bid lifecycle engines.

Status is free-form among the enumerated states: any authorized user may set
any state. Passing allowed_transitions (a set of (from, to) pairs) turns it
into a strict state machine without touching the engines.

Every accepted mutation runs inside one atomic scope: the field updates first,
then a single version increment. With expected_version the increment is a
compare-and-swap and a stale version rolls the whole scope back.
"""

from typing import Any, FrozenSet, Iterable, Optional, Sequence, Tuple
import uuid

from tender_service.logger import get_logger
from tender_service.repositories import BaseRepository
from tender_service.repositories.errors import RecordNotFound, RecordVersionMismatch, StorageError
from tender_service.services.authorization import AuthorizationGate
from tender_service.services.exceptions import (
    ConflictError,
    NotFoundError,
    TransitionNotAllowedError,
    storage_failure,
)

Transitions = Optional[Iterable[Tuple[Any, Any]]]


class LifecycleService:
    entity_name = "Entity"
    log = get_logger(__name__)

    def __init__(
            self,
            repository: BaseRepository,
            gate: AuthorizationGate,
            allowed_transitions: Transitions = None,
    ) -> None:
        self._repo = repository
        self._gate = gate
        self._allowed_transitions: Optional[FrozenSet[Tuple[Any, Any]]] = (
            frozenset(allowed_transitions) if allowed_transitions is not None else None
        )

    def get_by_id(self, entity_id: uuid.UUID):
        try:
            return self._repo.get(entity_id)
        except RecordNotFound as exc:
            raise NotFoundError(f"{self.entity_name} not found") from exc
        except StorageError as exc:
            raise storage_failure(self.log, f"{type(self).__name__}.get_by_id", exc) from exc

    def check_transition(self, current, new) -> None:
        if self._allowed_transitions is None:
            return
        if (current, new) not in self._allowed_transitions:
            raise TransitionNotAllowedError()

    def _apply(
            self,
            entity_id: uuid.UUID,
            changes: Sequence[Tuple[str, Any]],
            expected_version: Optional[int],
            operation: str,
    ):
        try:
            with self._repo.atomic():
                for column, value in changes:
                    self._repo.update_field(entity_id, column, value)
                self._repo.increment_version(entity_id, expected_version)
        except RecordVersionMismatch as exc:
            self.log.info("version_conflict", entity_id=str(entity_id), expected_version=expected_version)
            raise ConflictError() from exc
        except RecordNotFound as exc:
            raise NotFoundError(f"{self.entity_name} not found") from exc
        except StorageError as exc:
            raise storage_failure(self.log, f"{type(self).__name__}.{operation}", exc) from exc

        return self.get_by_id(entity_id)
