from dataclasses import dataclass


@dataclass(frozen=True)
class PassengerId:
    """乗客ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("PassengerId cannot be empty")

    def __str__(self) -> str:
        return self.value
