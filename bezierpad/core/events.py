from enum import StrEnum


class Button(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class Key(StrEnum):
    ENTER = "enter"
    SPACE = "space"
    ESCAPE = "escape"
    DELETE = "delete"
    OTHER = "other"
