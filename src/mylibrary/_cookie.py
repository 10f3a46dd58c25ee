"""Cookie entity, a specialized Food."""

from ._food import Food
from ._log import get_logger

__all__ = ["Cookie"]

log = get_logger(__name__)


class Cookie(Food):
    """A cookie crunches three times and asks for more.

    Sets its own sound instead of going through Food's constructor, and
    replaces announce() outright rather than extending it.
    """

    def __init__(self):
        self._sound = "crunch"
        log.debug("entity_created", entity=type(self).__name__, sound=self._sound)

    def message(self) -> str:
        """Text written by announce(), without the line break."""
        s = self._sound
        return f"{s}, {s}, {s}... Can I have some more!?"

    def announce(self) -> None:
        """Print the message to stdout."""
        print(self.message())
        log.debug("announced", entity=type(self).__name__)
