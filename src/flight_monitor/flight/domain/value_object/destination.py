from dataclasses import dataclass


@dataclass(frozen=True)
class Destination:
    """行き先

    前後の空白は取り除いて保持する。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Destination cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
