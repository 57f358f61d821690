from enum import Enum


class StatementSource(Enum):
    TEXT = "text"
    VOICE = "voice"
    IMAGE = "image"
