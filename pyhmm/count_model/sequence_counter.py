from abc import ABC, abstractmethod
from pyhmm.count_model.sample import Samples, SupervisedSample


class SampleCounter(ABC):
    @abstractmethod
    def observe_sample(
        self,
        sample: SupervisedSample,
    ) -> None:
        pass

    def observe_samples(
        self,
        samples: Samples,
    ) -> int:
        """Observes samples until the source is exhausted; returns how many were seen."""
        num_samples = 0
        for sample in samples:
            self.observe_sample(sample)
            num_samples += 1
        return num_samples
