"""Test the ErrorList aggregate."""
import pytest

from errstack import STACK_BANNER, ErrorList, new, new_frame


def test_empty_list():
    """Test an empty list has no message and collapses to no error."""
    errs = ErrorList()
    assert str(errs) == ""
    assert errs.summary() == ""
    assert errs.to_error() is None
    assert len(errs) == 0
    assert not errs


def test_single_error_is_verbatim():
    """Test a single error is reported exactly as itself."""
    f = new_frame(new("boom"), "read", "a.py", 10, "read")
    errs = ErrorList()
    errs.add(f)
    assert str(errs) == str(f)
    assert errs.summary() == "boom"
    assert errs.to_error() is f


def test_multiple_errors_are_joined():
    """Test several errors are newline-joined in insertion order."""
    e1 = new("first")
    e2 = new_frame(new("second"), "w", "b.py", 2, "write", 7)
    errs = ErrorList([e1, e2])
    assert str(errs) == str(e1) + "\n" + str(e2)
    assert str(errs) == "first\nsecond" + STACK_BANNER + "write(7)\n\tb.py:2 w\n"
    assert errs.summary() == "first\nsecond"
    assert errs.to_error() is errs


def test_add_keeps_order_and_duplicates():
    """Test add never deduplicates or reorders."""
    a, b = new("a"), new("b")
    errs = ErrorList()
    for e in (b, a, b):
        errs.add(e)
    assert list(errs) == [b, a, b]
    assert errs[1] is a
    assert str(errs) == "b\na\nb"


def test_add_rejects_non_errors():
    """Test only exceptions can be added."""
    errs = ErrorList()
    with pytest.raises(TypeError, match="only hold exceptions"):
        errs.add(None)
    with pytest.raises(TypeError):
        ErrorList(["not an error"])


def test_format_specs():
    """Test f-string encodings for lists."""
    errs = ErrorList([new("a"), new_frame(new("b"), "", "x.py", 1, "f")])
    assert f"{errs}" == str(errs)
    assert f"{errs:s}" == "a\nb"
    assert f"{errs:q}".startswith('"a\\nb\\n\\n===> errors stack:')


def test_list_is_raisable():
    """Test a collapsed list can be raised and caught as one error."""
    errs = ErrorList([new("a"), new("b")])
    with pytest.raises(ErrorList) as exc_info:
        raise errs.to_error()
    assert len(exc_info.value) == 2
