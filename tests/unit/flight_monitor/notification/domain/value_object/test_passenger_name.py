import pytest

from flight_monitor.notification.domain.value_object import PassengerId, PassengerName


class TestPassengerName:
    def test_valid_name(self):
        assert PassengerName(value="Anna").value == "Anna"

    def test_name_is_stripped(self):
        assert str(PassengerName(value=" Anna ")) == "Anna"

    def test_empty_name_raises_error(self):
        with pytest.raises(ValueError, match="Passenger name cannot be empty"):
            PassengerName(value="")

    def test_whitespace_only_name_raises_error(self):
        with pytest.raises(ValueError, match="Passenger name cannot be empty"):
            PassengerName(value="  ")

    def test_digits_are_left_to_the_input_layer(self):
        assert PassengerName(value="R2D2").value == "R2D2"


class TestPassengerId:
    def test_empty_id_raises_error(self):
        with pytest.raises(ValueError, match="PassengerId cannot be empty"):
            PassengerId(value="")
