"""Decide how a save turns into store requests and which repeat group each occurrence joins.

Every edit that submits a recurring rule replaces the edited occurrence with a freshly
expanded group; its former siblings keep their dates and their old group id.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Tuple
from uuid import uuid4

from ..core import expand_occurrences
from ..domain import EventOccurrence, RepeatRule
from .errors import EventSaveError


def new_identifier() -> str:
    return str(uuid4())


@dataclass(frozen=True, slots=True)
class SavePlan:
    delete_ids: Tuple[str, ...] = ()
    update: Optional[EventOccurrence] = None
    create: Tuple[EventOccurrence, ...] = ()

    @property
    def group_id(self) -> Optional[str]:
        for event in self.create:
            if event.group_id:
                return event.group_id
        return None


def plan_create(
    event: EventOccurrence,
    *,
    horizon: Optional[date] = None,
    id_factory: Callable[[], str] = new_identifier,
) -> SavePlan:
    if not event.repeat.is_recurring:
        single = event.with_changes(id=event.id or id_factory(), repeat=RepeatRule.none())
        return SavePlan(create=(single,))
    return SavePlan(create=_new_group(event, horizon=horizon, id_factory=id_factory))


def plan_update(
    event: EventOccurrence,
    *,
    horizon: Optional[date] = None,
    id_factory: Callable[[], str] = new_identifier,
) -> SavePlan:
    if not event.id:
        raise EventSaveError("Cannot update an event without an id.")
    if not event.repeat.is_recurring:
        return SavePlan(update=event.with_changes(repeat=RepeatRule.none()))
    return SavePlan(
        delete_ids=(event.id,),
        create=_new_group(event, horizon=horizon, id_factory=id_factory),
    )


def plan_save(
    event: EventOccurrence,
    *,
    editing: bool,
    horizon: Optional[date] = None,
    id_factory: Callable[[], str] = new_identifier,
) -> SavePlan:
    if editing:
        return plan_update(event, horizon=horizon, id_factory=id_factory)
    return plan_create(event, horizon=horizon, id_factory=id_factory)


def _new_group(
    event: EventOccurrence,
    *,
    horizon: Optional[date],
    id_factory: Callable[[], str],
) -> Tuple[EventOccurrence, ...]:
    rule = RepeatRule(
        type=event.repeat.type,
        interval=event.repeat.interval,
        end_date=event.repeat.end_date,
        group_id=id_factory(),
    )
    template = event.with_changes(repeat=rule)
    return tuple(expand_occurrences(template, horizon=horizon, id_factory=id_factory))
