"""Verb tags — the label recorded on history facts."""

from enum import Enum


class Verb(str, Enum):
    CARRY = "Carry"
    CLIMB = "Climb"
    CLOSE = "Close"
    GIVE = "Give"
    KILL = "Kill"
    LEAN_TOWARD = "LeanToward"
    LOCK = "Lock"
    MOVE = "Move"
    OPEN = "Open"
    PICK_UP = "PickUp"
    PLAY = "Play"
    PUT_DOWN = "PutDown"
    SLEEP_IN = "SleepIn"
    STAND_ON = "StandOn"
    TALK = "Talk"
    WAKE_UP_IN = "WakeUpIn"
    WALK_THROUGH = "WalkThrough"
    UNLOCK = "Unlock"
