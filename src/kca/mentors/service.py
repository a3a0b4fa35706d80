"""Mentor slot booking."""

from __future__ import annotations

import structlog

from kca.database import DataStore
from kca.db.models import MentorSlot, User, new_id

logger = structlog.get_logger()

MEETING_BASE_URL = "https://meet.google.com/"


async def get_slot(store: DataStore, slot_id: str) -> MentorSlot:
    """
    Raises:
        LookupError: If the slot does not exist.
    """
    slot = await store.mentor_slots.find_by_id(slot_id)
    if slot is None:
        msg = "Slot not found"
        raise LookupError(msg)
    return slot


async def available_slots(store: DataStore, mentor_id: str) -> list[MentorSlot]:
    """Open slots for a mentor, earliest first."""
    slots = [s for s in await store.mentor_slots.list_for_mentor(mentor_id) if s.status == "available"]
    return sorted(slots, key=lambda s: (s.date, s.start_time))


async def book_slot(store: DataStore, slot_id: str, student: User) -> MentorSlot:
    """
    Reserve a slot for ``student`` and attach a meeting link.

    Raises:
        LookupError: If the slot does not exist.
        ValueError: If the slot is already booked.
    """
    slot = await get_slot(store, slot_id)
    if slot.is_booked:
        msg = "Slot already booked"
        raise ValueError(msg)
    slot.is_booked = True
    slot.student_id = student.id
    slot.status = "booked"
    slot.meeting_link = MEETING_BASE_URL + new_id()[:12]
    await store.mentor_slots.save(slot)
    logger.info("slot_booked", slot_id=slot.id, mentor_id=slot.mentor_id, student_id=student.id)
    return slot


async def cancel_booking(store: DataStore, slot_id: str, user: User) -> MentorSlot:
    """
    Release a booking. Only the booking student or an admin may cancel.

    Raises:
        LookupError: If the slot does not exist.
        PermissionError: If ``user`` is neither the booker nor an admin.
    """
    slot = await get_slot(store, slot_id)
    if slot.student_id != user.id and user.role != "admin":
        msg = "Not authorized"
        raise PermissionError(msg)
    slot.is_booked = False
    slot.student_id = None
    slot.status = "available"
    slot.meeting_link = None
    await store.mentor_slots.save(slot)
    logger.info("slot_cancelled", slot_id=slot.id, cancelled_by=user.id)
    return slot


async def add_slot(
    store: DataStore,
    mentor: User,
    date: str,
    start_time: str,
    end_time: str,
    duration: int = 1,
    price: float = 25,
) -> MentorSlot:
    slot = MentorSlot(
        id=new_id(),
        mentor_id=mentor.id,
        date=date,
        start_time=start_time,
        end_time=end_time,
        duration=duration,  # type: ignore[arg-type]
        price=price,
    )
    await store.mentor_slots.save(slot)
    logger.info("slot_created", slot_id=slot.id, mentor_id=mentor.id, date=date)
    return slot
