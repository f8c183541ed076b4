from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LinkCountData:
    count: int  # times the source was followed by / emitted the destination
    total: int  # aggregate count of the source

    @property
    def ratio(self) -> float:
        return 0.0 if self.total == 0 else self.count / self.total
