"""Test base error helpers and NotFound."""
import pytest

from errstack import ErrorList, NotFound, err, is_not_found, new, new_frame, summary


class Relayed(Exception):
    """Error from another boundary that exposes its cause via unwrap()."""

    def __init__(self, inner):
        super().__init__("relayed")
        self.inner = inner

    def unwrap(self):
        return self.inner


class Labelled(Exception):
    """Error that stores plain data under the capability names."""

    def __init__(self, message, summary="short text", unwrap="next"):
        super().__init__(message)
        self.summary = summary
        self.unwrap = unwrap


class Short(Exception):
    """Error with its own summary."""

    def summary(self):
        return "short"


def test_new():
    """Test new errors format as their text and are distinct values."""
    a = new("disk full")
    b = new("disk full")
    assert str(a) == "disk full"
    assert str(b) == "disk full"
    assert a is not b
    assert a != b


def test_err_strips_frames():
    """Test err returns the innermost non-frame cause."""
    leaf = new("boom")
    assert err(leaf) is leaf

    chain = new_frame(new_frame(leaf, "a", "a.py", 1, "inner"), "b", "b.py", 2, "outer")
    assert err(chain) is leaf


def test_err_does_not_unwrap_other_types():
    """Test err only strips frames, not other unwrap-capable errors."""
    relayed = Relayed(new("inner"))
    assert err(relayed) is relayed
    assert err(new_frame(relayed, "", "x.py", 1, "f")) is relayed


def test_summary():
    """Test summary uses the summary capability when present."""
    assert summary(new("plain")) == "plain"
    assert summary(Short("long message")) == "short"


def test_not_found_message():
    """Test NotFound formats as its category followed by 'not found'."""
    e = NotFound("bucket")
    assert str(e) == "bucket not found"
    assert e.category == "bucket"

    with pytest.raises(NotFound, match="bucket not found"):
        raise e


def test_is_not_found():
    """Test NotFound is detected directly and through frames."""
    leaf = NotFound("user")
    assert is_not_found(leaf)

    wrapped = leaf
    for i in range(5):
        wrapped = new_frame(wrapped, "lookup", "users.py", i, "get_user", i)
        assert is_not_found(wrapped)


def test_is_not_found_through_other_unwrappers():
    """Test is_not_found follows any unwrap() chain."""
    assert is_not_found(Relayed(NotFound("key")))
    assert is_not_found(new_frame(Relayed(NotFound("key")), "", "x.py", 1, "f"))
    assert not is_not_found(Relayed(None))


def test_is_not_found_negative():
    """Test other errors and the absence of an error are not NotFound."""
    assert not is_not_found(new("user not found"))
    assert not is_not_found(new_frame(new("x"), "", "x.py", 1, "f"))
    assert not is_not_found(None)
    assert not is_not_found(ErrorList().to_error())
    assert not is_not_found(ErrorList([NotFound("a"), NotFound("b")]))


def test_summary_ignores_data_attributes():
    """Test a non-callable summary attribute does not count as a summary."""
    leaf = Labelled("boom")
    assert summary(leaf) == "boom"

    wrapped = new_frame(leaf, "c", "a.py", 1, "f")
    assert summary(wrapped) == "boom"
    assert wrapped.summary() == "boom"
    assert f"{wrapped:s}" == "boom"
    assert ErrorList([leaf, new("x")]).summary() == "boom\nx"


def test_is_not_found_ignores_data_attributes():
    """Test a non-callable unwrap attribute ends the chain walk."""
    assert not is_not_found(Labelled("boom"))
    assert not is_not_found(new_frame(Labelled("boom"), "c", "a.py", 1, "f"))
