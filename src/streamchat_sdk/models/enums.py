from enum import IntEnum


class SortDirection(IntEnum):
    ASC = 1
    DESC = -1
