"""Operation codes."""

from enum import Enum


class Opcode(str, Enum):
    FETCH = "fetch"
    UPDATE = "update"
    ARCHIVE = "archive"
    REVERT = "revert"
