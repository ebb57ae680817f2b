from exodus.errors import DataError, PlantError


def test_data_error_displays_its_message():
    assert str(DataError("invalid data type")) == "invalid data type"


def test_plant_error_displays_its_message():
    assert str(PlantError("invalid habit")) == "invalid habit"


def test_plant_error_is_caught_as_data_error():
    error = PlantError("invalid habit")
    caught = None
    try:
        raise error
    except DataError as exc:
        caught = exc
    assert caught is error
    assert caught.message == "invalid habit"
    assert str(caught) == "invalid habit"


def test_data_error_is_not_a_plant_error():
    error = DataError("invalid data type")
    caught = None
    try:
        raise error
    except PlantError:
        caught = "plant"
    except DataError as exc:
        caught = exc
    assert caught is error
    assert str(caught) == "invalid data type"