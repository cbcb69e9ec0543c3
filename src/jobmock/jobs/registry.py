"""Job registry — the owned keyed table of job records.

Each :class:`~jobmock.jobs.client.LocalJobsClient` owns one registry. There
is no module-level state: two clients never see each other's jobs.

Not safe for concurrent mutation of the same key; callers keep at most one
in-flight mutating call per job identifier.
"""

from __future__ import annotations

from collections.abc import Iterator

from jobmock.errors import JobNotFoundError
from jobmock.jobs._types import JobRecord


class JobRegistry:
    """In-memory table mapping job identifiers to records.

    Example:
        >>> registry = JobRegistry()
        >>> registry.put(record)
        >>> registry.require("j1") is record
        True
        >>> registry.remove("j1")
        >>> registry.get("j1") is None
        True
    """

    def __init__(self) -> None:
        self._jobs: dict[str, JobRecord] = {}

    def put(self, record: JobRecord) -> JobRecord | None:
        """Store ``record`` under its name.

        Returns:
            The record it replaced, or None. Overwrites are last-write-wins.
        """
        previous = self._jobs.get(record.name)
        self._jobs[record.name] = record
        return previous

    def get(self, name: str) -> JobRecord | None:
        return self._jobs.get(name)

    def require(self, name: str) -> JobRecord:
        """Get a record or raise ``JobNotFoundError``."""
        record = self._jobs.get(name)
        if record is None:
            raise JobNotFoundError(name)
        return record

    def remove(self, name: str) -> JobRecord:
        """Remove and return a record or raise ``JobNotFoundError``."""
        try:
            return self._jobs.pop(name)
        except KeyError:
            raise JobNotFoundError(name) from None

    def values(self) -> list[JobRecord]:
        """Snapshot of all records."""
        return list(self._jobs.values())

    def clear(self) -> None:
        self._jobs.clear()

    def __len__(self) -> int:
        return len(self._jobs)

    def __contains__(self, name: object) -> bool:
        return name in self._jobs

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._jobs))

    def __repr__(self) -> str:
        return f"JobRegistry({len(self._jobs)} jobs)"
