from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from ..core import events_for_day, filter_events, find_overlaps
from ..data import EventStore, OccurrenceIndex, StorageError
from ..domain import EventOccurrence, ViewGranularity
from .context import ServiceContext
from .errors import EventLoadError, EventSaveError
from .repeat_groups import SavePlan, plan_save

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    @property
    def store(self) -> EventStore:
        return self.context.event_store

    @property
    def index(self) -> OccurrenceIndex:
        return self.context.index

    def load_events(self) -> List[EventOccurrence]:
        """Refresh the index from the store and return the events in storage order."""

        try:
            events = self.store.list()
        except StorageError as exc:
            logger.exception("Failed to load events")
            raise EventLoadError("Failed to load events.") from exc
        self.index.hydrate(events)
        logger.info("Loaded %d events", len(events))
        return events

    def events(self) -> List[EventOccurrence]:
        return self.index.all()

    def save_event(self, event: EventOccurrence, *, editing: bool) -> List[EventOccurrence]:
        """Create or update ``event``; returns the occurrences written by this save."""

        plan = plan_save(event, editing=editing, horizon=self.context.horizon)
        try:
            written = self._apply(plan)
        except StorageError as exc:
            logger.exception("Failed to save event %s", event.id or event.title)
            raise EventSaveError("Failed to save event.") from exc
        logger.info(
            "%s event %s: %d occurrence(s), group %s",
            "Updated" if editing else "Created",
            event.id or event.title,
            len(written),
            plan.group_id or "-",
        )
        self.load_events()
        return written

    def _apply(self, plan: SavePlan) -> List[EventOccurrence]:
        for event_id in plan.delete_ids:
            self.store.delete_one(event_id)
        written: List[EventOccurrence] = []
        if plan.update is not None:
            written.append(self.store.update_one(plan.update))
        if len(plan.create) == 1 and not plan.group_id:
            written.append(self.store.create_one(plan.create[0]))
        elif plan.create:
            written.extend(self.store.create_many(list(plan.create)))
        return written

    def delete_event(self, event_id: str) -> None:
        try:
            self.store.delete_one(event_id)
        except StorageError as exc:
            logger.exception("Failed to delete event %s", event_id)
            raise EventSaveError(f"Failed to delete event '{event_id}'.") from exc
        logger.info("Deleted event %s", event_id)
        self.load_events()

    def find_overlaps(self, candidate: EventOccurrence) -> List[EventOccurrence]:
        return find_overlaps(candidate, self.events())

    def visible_events(
        self,
        query: str,
        reference: date,
        view: Union[ViewGranularity, str] = ViewGranularity.MONTH,
    ) -> List[EventOccurrence]:
        return filter_events(self.events(), query, reference, view)

    def list_for_day(self, target_day: date) -> List[EventOccurrence]:
        return events_for_day(self.events(), target_day)

    def group_members(self, group_id: str) -> List[EventOccurrence]:
        return self.index.group_members(group_id)

    def get(self, event_id: str) -> Optional[EventOccurrence]:
        return self.index.get(event_id)
