from abc import ABC, abstractmethod


class ProbeSequence(ABC):
    @abstractmethod
    def offset(self, step: int) -> int:
        ...

    def address(self, base: int, step: int, capacity: int) -> int:
        # steps are 1-based, step 1 is the base slot itself
        return (base + self.offset(step)) % capacity


class LinearProbe(ProbeSequence):
    def offset(self, step: int) -> int:
        return step - 1


class QuadraticProbe(ProbeSequence):
    def offset(self, step: int) -> int:
        return (step - 1) + (step - 1) ** 2
