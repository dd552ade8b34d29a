"""Scripted stand-ins for random.Random and the console."""
from typing import Iterable, Optional


class ScriptedRandom:
    """Returns queued values instead of random ones.

    randrange() hands out `indexes` in order, then 0 once they run out.
    randint() hands out `ints` in order, then its lower bound.
    """

    def __init__(self, indexes: Optional[Iterable[int]] = None, ints: Optional[Iterable[int]] = None):
        self._indexes = list(indexes or [])
        self._ints = list(ints or [])

    def randrange(self, n: int) -> int:
        index = self._indexes.pop(0) if self._indexes else 0
        assert 0 <= index < n, f"scripted index {index} out of range {n}"
        return index

    def randint(self, a: int, b: int) -> int:
        value = self._ints.pop(0) if self._ints else a
        assert a <= value <= b, f"scripted int {value} out of range [{a}, {b}]"
        return value


class ScriptedInput:
    """input() replacement; raises EOFError once the script is used up."""

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class Output:
    """print() replacement that keeps every line."""

    def __init__(self):
        self.lines: list[str] = []

    def __call__(self, *args) -> None:
        self.lines.append(" ".join(str(a) for a in args))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
