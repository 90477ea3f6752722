"""
Immutable injury -> severity lookup injected into the triage queue.
"""
from types import MappingProxyType
from collections.abc import Mapping
from typing import Dict, Iterator, List

from .errors import InvalidSeverity, UnknownInjury

MIN_SEVERITY = 1
MAX_SEVERITY = 5


class InjurySeverityTable(Mapping):
    """
    Read-only mapping from injury name to severity (1 = most urgent).

    Entries are validated once at construction; the table cannot be mutated
    afterwards.
    """

    def __init__(self, entries: Mapping[str, int],
                 min_severity: int = MIN_SEVERITY, max_severity: int = MAX_SEVERITY):
        validated: Dict[str, int] = {}
        for injury, severity in entries.items():
            # bool is an int subclass; reject it explicitly
            if isinstance(severity, bool) or not isinstance(severity, int) \
                    or not min_severity <= severity <= max_severity:
                raise InvalidSeverity(injury, severity, min_severity, max_severity)
            validated[injury] = severity
        self._entries = MappingProxyType(validated)
        self.min_severity = min_severity
        self.max_severity = max_severity

    def __getitem__(self, injury: str) -> int:
        return self._entries[injury]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __reduce__(self):
        # mappingproxy is not picklable; rebuild from a plain dict in worker processes
        return (self.__class__, (dict(self._entries), self.min_severity, self.max_severity))

    def __repr__(self):
        return f"InjurySeverityTable({len(self)} injuries)"

    def severity_of(self, injury_type: str) -> int:
        """Returns the severity for an injury, raising UnknownInjury if absent."""
        try:
            return self._entries[injury_type]
        except KeyError:
            raise UnknownInjury(injury_type) from None

    def injuries(self) -> List[str]:
        """Injury names in menu order (alphabetical)."""
        return sorted(self._entries)
