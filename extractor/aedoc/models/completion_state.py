"""Progress of the deferred resolution pass."""

from enum import Enum


class CompletionState(Enum):
    """Progress of the deferred (second) pass for one documentation object.

    An object found IN_PROGRESS while another object is resolving against it
    means the two inherit from each other.
    """

    UNVISITED = "unvisited"
    IN_PROGRESS = "in-progress"
    DONE = "done"
