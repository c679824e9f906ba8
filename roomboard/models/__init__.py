from roomboard.models.base import Base
from roomboard.models.project import Project
from roomboard.models.room import Room, RoomStatus, RoomType
from roomboard.models.section import Section
from roomboard.models.stage import ChecklistItem, Stage

__all__ = ["Base", "ChecklistItem", "Project", "Room", "RoomStatus", "RoomType", "Section", "Stage"]
