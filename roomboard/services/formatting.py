import re

from roomboard.models.room import Room

_WORD = re.compile(r"\b\w")


def humanize(value: str) -> str:
    """LIVING_ROOM -> Living Room, NEEDS_ATTENTION -> Needs Attention."""
    text = value.replace("_", " ").lower()
    return _WORD.sub(lambda m: m.group(0).upper(), text)


def type_label(room_type: str) -> str:
    return humanize(room_type)


def status_label(status: str) -> str:
    return humanize(status)


def display_name(room: Room) -> str:
    """custom_name, then name, then the humanized room type."""
    for label in (room.custom_name, room.name):
        if label and label.strip():
            return label.strip()
    return type_label(room.type)
