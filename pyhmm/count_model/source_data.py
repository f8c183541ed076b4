from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple


@dataclass(slots=True)
class SourceData:
    total: int = 0  # aggregate count of the source
    destination_counts: Dict[Any, int] = field(default_factory=lambda: {})

    def observe_total(self, num: int = 1) -> None:
        self.total += num

    def observe_destination(self, dst, num: int = 1) -> None:
        destination_counts = self.destination_counts
        destination_counts[dst] = num + destination_counts.get(dst, 0)

    def get_count(self, dst) -> int:
        return self.destination_counts.get(dst, 0)

    def contains(self, dst) -> bool:
        return dst in self.destination_counts

    def destinations(self) -> Iterator[Tuple[Any, int]]:
        return iter(self.destination_counts.items())

    @property
    def destination_total(self) -> int:
        return sum(self.destination_counts.values())

    def __len__(self) -> int:
        return len(self.destination_counts)

    def prune(self, threshold: int) -> int:
        """
        Drops every destination seen fewer than threshold times and takes its count
        off the total. Returns how many destinations were dropped.
        """
        dropped = [
            num for num in self.destination_counts.values() if num < threshold
        ]
        if not dropped:
            return 0
        self.total -= sum(dropped)
        self.destination_counts = {
            dst: num
            for dst, num in self.destination_counts.items()
            if num >= threshold
        }
        return len(dropped)
