"""A collection of topics searchable by id or title."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import Topic


def _matches(topic: Topic, key: int | str) -> bool:
    return topic.title == key or topic.id == key


class TopicManager:
    """Holds topics in insertion order."""

    def __init__(self, topics: Iterable[Topic] = ()) -> None:
        self._topics: list[Topic] = list(topics)

    @property
    def topics(self) -> tuple[Topic, ...]:
        return tuple(self._topics)

    def __len__(self) -> int:
        return len(self._topics)

    def __iter__(self) -> Iterator[Topic]:
        return iter(self._topics)

    def add(self, topic: Topic) -> Topic:
        """Append a topic and return it."""
        self._topics.append(topic)
        return topic

    def remove(self, key: int | str) -> int:
        """Remove every topic whose title or id equals key; return how many went."""
        before = len(self._topics)
        self._topics = [t for t in self._topics if not _matches(t, key)]
        return before - len(self._topics)

    def find(self, key: int | str) -> list[Topic]:
        """Return the topics whose title or id equals key."""
        return [t for t in self._topics if _matches(t, key)]

    def render_all(self) -> str:
        if not self._topics:
            return "No topics available.\n"
        return "".join(t.render() for t in self._topics)

    def render_matching(self, key: int | str) -> str:
        return "".join(t.render() for t in self.find(key))