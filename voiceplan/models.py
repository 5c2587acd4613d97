import enum


class Category(str, enum.Enum):
    task = "Task"
    event = "Event"
    note = "Note"
    reminder = "Reminder"
    idea = "Idea"


class Priority(str, enum.Enum):
    low = "Low"
    normal = "Normal"
    high = "High"
    urgent = "Urgent"
