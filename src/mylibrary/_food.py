"""Food entity."""

from ._log import get_logger

__all__ = ["Food"]

log = get_logger(__name__)


class Food:
    """Plain food. Eating it makes its sound twice.

    The sound is assigned once in the constructor and exposed read-only.
    """

    def __init__(self):
        self._sound = "food"
        log.debug("entity_created", entity=type(self).__name__, sound=self._sound)

    @property
    def sound(self) -> str:
        return self._sound

    def message(self) -> str:
        """Text written by announce(), without the line break."""
        return f"{self._sound}, {self._sound}"

    def announce(self) -> None:
        """Print the message to stdout."""
        print(self.message())
        log.debug("announced", entity=type(self).__name__)

    def __repr__(self):
        return f"{type(self).__name__}(sound={self._sound!r})"
