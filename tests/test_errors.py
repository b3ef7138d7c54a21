import pytest

from statevec.errors import SUCCESS, CommunicationError, check_result


def test_success_passes_through():
    assert check_result("MPI_Send", SUCCESS) == SUCCESS


def test_failure_raises_with_details():
    with pytest.raises(CommunicationError) as info:
        check_result("MPI_Send", 7)
    assert info.value.routine == "MPI_Send"
    assert info.value.error_code == 7
    assert "MPI_Send" in str(info.value)


def test_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        check_result("MPI_Barrier", -1)


def test_description_matches_message():
    err = CommunicationError("MPI_Recv", 3)
    assert str(err) == err.description
    assert "3" in err.description