from enum import Enum


class Role(str, Enum):
    ODD = 'odd'
    EVEN = 'even'


# Admission order: the first free role in this sequence is assigned
ROLE_PRIORITY = (Role.ODD, Role.EVEN)
