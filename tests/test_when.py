import pytest

from harness.sample_mock import SampleClass, SampleError, SampleMock
from mockledger import exactly, stub_raise, stub_return, verify, when


def test_return_value_type(mock: SampleMock) -> None:
    assert mock.with_return_value(174) == 174

    stub_return(mock, "A").with_return_value(174)
    assert mock.with_return_value(174) == 174

    stub_return(mock, 203).with_return_value(174)
    assert mock.with_return_value(174) == 203

    assert mock.with_return_value(403) == 403


def test_return_reference_type(mock: SampleMock) -> None:
    first = SampleClass(174)
    second = SampleClass(174)
    third = SampleClass(174)

    assert mock.with_return_value(first) is first

    stub_return(mock, second).with_return_value(first)
    assert mock.with_return_value(first) is second
    assert mock.with_return_value(third) is third


def test_stub_return_is_last_write_wins(mock: SampleMock) -> None:
    stub_return(mock, 1).with_return_value(0)
    stub_return(mock, 2).with_return_value(0)
    assert mock.with_return_value(0) == 2


def test_stubbing_does_not_count_as_call(mock: SampleMock) -> None:
    stub_return(mock, 203).with_return_value(174)
    verify(mock, exactly(0)).with_return_value(174)
    mock.with_return_value(174)
    verify(mock, exactly(1)).with_return_value(174)


def test_raise(mock: SampleMock) -> None:
    mock.with_raising(174)

    stub_raise(mock, SampleError("boom")).with_raising(174)
    with pytest.raises(SampleError, match="boom"):
        mock.with_raising(174)

    mock.with_raising(203)


def test_raise_is_not_wrapped(mock: SampleMock) -> None:
    err = SampleError("boom")
    stub_raise(mock, err).with_raising(1)
    with pytest.raises(SampleError) as info:
        mock.with_raising(1)
    assert info.value is err


def test_raise_takes_precedence_over_return(mock: SampleMock) -> None:
    stub_return(mock, 5.0).with_raising_returning(17.4)
    assert mock.with_raising_returning(17.4) == 5.0

    stub_raise(mock, SampleError()).with_raising_returning(17.4)
    with pytest.raises(SampleError):
        mock.with_raising_returning(17.4)

    assert mock.with_raising_returning(1.0) == 1.0


def test_raise_stub_on_plain_method_has_no_effect(mock: SampleMock) -> None:
    stub_raise(mock, SampleError()).with_single_param(1)
    mock.with_single_param(1)
    verify(mock, exactly(1)).with_single_param(1)


def test_when_spellings(mock: SampleMock) -> None:
    when(mock, then_return=9).with_return_value(1)
    assert mock.with_return_value(1) == 9

    when(mock, then_raise=SampleError()).with_raising(1)
    with pytest.raises(SampleError):
        mock.with_raising(1)


def test_when_requires_exactly_one_behavior(mock: SampleMock) -> None:
    with pytest.raises(TypeError):
        when(mock)
    with pytest.raises(TypeError):
        when(mock, then_return=1, then_raise=SampleError())


def test_stub_raise_requires_exception(mock: SampleMock) -> None:
    with pytest.raises(TypeError):
        stub_raise(mock, "boom")  # type: ignore[arg-type]
