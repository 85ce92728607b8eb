from dataclasses import dataclass


@dataclass(frozen=True)
class PassengerName:
    """乗客名

    数字を含まないことの検証は入力層（リクエストモデル）で行う。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Passenger name cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
