"""Mentor API: profiles, slots and bookings under /api/mentors."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kca.auth.dependencies import get_current_user, require_roles
from kca.database import DataStore, get_store
from kca.db.models import MentorSlot, User
from kca.mentors.schemas import (
    BookingConfirmation,
    BookingResponse,
    MentorProfile,
    SlotCreateRequest,
    SlotResponse,
    SlotWithNamesResponse,
)
from kca.mentors.service import add_slot, available_slots, book_slot, cancel_booking
from kca.problems.schemas import MessageResponse

router = APIRouter(prefix="/api/mentors", tags=["Mentors"])

# Shown on every mentor card until mentors can edit their own profile.
DEFAULT_SPECIALIZATION = "Python, JavaScript, Algorithms"
DEFAULT_RATING = 4.8
DEFAULT_SESSIONS_COMPLETED = 47
DEFAULT_BIO = (
    "Experienced coding mentor with 10+ years in software engineering. "
    "Passionate about teaching kids to code!"
)


def _slot_fields(slot: MentorSlot) -> dict:
    return {
        "id": slot.id,
        "mentor_id": slot.mentor_id,
        "date": slot.date,
        "start_time": slot.start_time,
        "end_time": slot.end_time,
        "duration": slot.duration,
        "price": slot.price,
        "is_booked": slot.is_booked,
        "student_id": slot.student_id,
        "meeting_link": slot.meeting_link,
        "status": slot.status,
    }


@router.get("/mentors", response_model=list[MentorProfile])
async def list_mentors(store: DataStore = Depends(get_store)) -> list[MentorProfile]:
    return [
        MentorProfile(
            id=m.id,
            username=m.username,
            email=m.email,
            avatar=m.avatar,
            specialization=DEFAULT_SPECIALIZATION,
            rating=DEFAULT_RATING,
            sessions_completed=DEFAULT_SESSIONS_COMPLETED,
            bio=DEFAULT_BIO,
        )
        for m in await store.users.list_by_role("mentor")
    ]


@router.get("/slots/{mentor_id}", response_model=list[SlotResponse])
async def mentor_slots(mentor_id: str, store: DataStore = Depends(get_store)) -> list[SlotResponse]:
    """Available slots for one mentor, ordered by date and start time."""
    return [SlotResponse(**_slot_fields(s)) for s in await available_slots(store, mentor_id)]


@router.get("/slots", response_model=list[SlotWithNamesResponse])
async def all_slots(
    _user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> list[SlotWithNamesResponse]:
    result = []
    for slot in await store.mentor_slots.list_all():
        mentor = await store.users.find_by_id(slot.mentor_id)
        student = await store.users.find_by_id(slot.student_id) if slot.student_id else None
        result.append(
            SlotWithNamesResponse(
                **_slot_fields(slot),
                mentor_name=mentor.username if mentor else "Unknown",
                student_name=student.username if student else None,
            )
        )
    return result


@router.post("/book/{slot_id}", response_model=BookingConfirmation)
async def book(
    slot_id: str,
    user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> BookingConfirmation:
    try:
        slot = await book_slot(store, slot_id, user)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return BookingConfirmation(message="Booking confirmed!", slot=SlotResponse(**_slot_fields(slot)))


@router.post("/cancel/{slot_id}", response_model=MessageResponse)
async def cancel(
    slot_id: str,
    user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> MessageResponse:
    try:
        await cancel_booking(store, slot_id, user)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e)) from e
    return MessageResponse(message="Booking cancelled")


@router.get("/my-bookings", response_model=list[BookingResponse])
async def my_bookings(
    user: User = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> list[BookingResponse]:
    result = []
    for slot in await store.mentor_slots.list_for_student(user.id):
        mentor = await store.users.find_by_id(slot.mentor_id)
        result.append(
            BookingResponse(
                **_slot_fields(slot),
                mentor_name=mentor.username if mentor else "Unknown",
                mentor_avatar=mentor.avatar if mentor else None,
            )
        )
    return result


@router.post("/slots", response_model=SlotResponse, status_code=201)
async def create_slot(
    body: SlotCreateRequest,
    user: User = Depends(require_roles("mentor", "admin")),
    store: DataStore = Depends(get_store),
) -> SlotResponse:
    slot = await add_slot(
        store,
        user,
        date=body.date,
        start_time=body.start_time,
        end_time=body.end_time,
        duration=body.duration,
        price=body.price,
    )
    return SlotResponse(**_slot_fields(slot))
