from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterator, Optional, Tuple, Type
from pyhmm.count_model.link_count_data import LinkCountData
from pyhmm.count_model.source_data import SourceData


@dataclass(slots=True)
class LinkCounter:
    """
    Source -> SourceData table. Each source owns its aggregate total and its
    per-destination breakdown; both are only ever changed through the entry.
    """

    _link_map: Dict[Any, SourceData] = field(default_factory=lambda: {})
    entry_type: ClassVar[Type[SourceData]] = SourceData

    def observe_link(
        self,
        src,
        dst,
        num: int = 1,
    ) -> None:
        source_data = self.get_source_data(src)
        source_data.observe_total(num)
        source_data.observe_destination(dst, num)

    def get_source_data(
        self,
        src,
    ) -> SourceData:
        link_map = self._link_map
        source_data = link_map.get(src, None)
        if source_data is None:
            source_data = self.entry_type()
            link_map[src] = source_data
        return source_data

    def find_source_data(
        self,
        src,
    ) -> Optional[SourceData]:
        return self._link_map.get(src, None)

    def get_total(
        self,
        src,
    ) -> int:
        source_data = self._link_map.get(src, None)
        return 0 if source_data is None else source_data.total

    def get_count(
        self,
        src,
        dst,
    ) -> int:
        source_data = self._link_map.get(src, None)
        return 0 if source_data is None else source_data.get_count(dst)

    def get_link_count(
        self,
        src,
        dst,
    ) -> LinkCountData:
        source_data = self._link_map.get(src, None)
        if source_data is None:
            return LinkCountData(0, 0)
        return LinkCountData(source_data.get_count(dst), source_data.total)

    def contains_source(self, src) -> bool:
        return src in self._link_map

    def contains_link(self, src, dst) -> bool:
        source_data = self._link_map.get(src, None)
        return source_data is not None and source_data.contains(dst)

    def sources(self) -> Iterator[Any]:
        return iter(self._link_map.keys())

    def items(self) -> Iterator[Tuple[Any, SourceData]]:
        return iter(self._link_map.items())

    def links(self) -> Iterator[Tuple[Any, Any, int]]:
        return (
            (src, dst, num)
            for src, source_data in self._link_map.items()
            for dst, num in source_data.destinations()
        )

    def __len__(self) -> int:
        return len(self._link_map)

    def prune(self, threshold: int) -> int:
        """
        Applies SourceData.prune to every source and removes the sources whose
        breakdown was emptied by it. Sources that never had a destination stay.
        Returns the number of destinations removed.
        """
        removed = 0
        emptied = []
        for src, source_data in self._link_map.items():
            num_dropped = source_data.prune(threshold)
            if num_dropped > 0 and len(source_data) == 0:
                emptied.append(src)
            removed += num_dropped
        for src in emptied:
            del self._link_map[src]
        return removed
