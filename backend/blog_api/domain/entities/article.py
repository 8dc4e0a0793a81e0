"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from typing import Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _Unset:
    """Marker type for a patch field that was not supplied."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass
class Article:
    """Core domain entity representing a blog article."""

    id: str
    title: str
    content: str
    excerpt: str | None = None
    published: bool = False
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def apply(self, patch: "ArticlePatch", now: datetime | None = None) -> "Article":
        """Return a copy with the patch merged in and updated_at refreshed.

        created_at is carried over untouched; fields the patch does not
        carry keep their current value.
        """
        changes = patch.changes()
        changes["tags"] = list(changes.get("tags", self.tags))
        changes["created_at"] = self.created_at
        changes["updated_at"] = max(now or _utcnow(), self.created_at)
        return replace(self, **changes)

    def copy(self) -> "Article":
        return replace(self, tags=list(self.tags))


@dataclass(frozen=True)
class ArticleDraft:
    """Validated field values for a new article; id and timestamps are assigned on create."""

    title: str
    content: str
    excerpt: str | None = None
    published: bool = False
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ArticlePatch:
    """Partial update. A field left as UNSET is preserved on merge."""

    title: str = UNSET
    content: str = UNSET
    excerpt: str | None = UNSET
    published: bool = UNSET
    tags: tuple[str, ...] = UNSET

    def changes(self) -> dict[str, Any]:
        """Only the supplied fields, keyed by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.changes()
