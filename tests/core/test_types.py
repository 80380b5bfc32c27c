import pytest
from higherorder.core.enums import NameFormat
from higherorder.core.exceptions import InvalidInputKind
from higherorder.core.types import validate_labels


def test_validate_labels_returns_input():
    labels = ["a.b", "c"]
    assert validate_labels(labels) is labels
    assert validate_labels([]) == []


@pytest.mark.parametrize(
    "labels, index, kind",
    [
        ([1], 0, "int"),
        (["a", None], 1, "NoneType"),
        (["a", "b", 2.5], 2, "float"),
    ],
)
def test_validate_labels_rejects_non_text(labels, index, kind):
    with pytest.raises(InvalidInputKind) as exc_info:
        validate_labels(labels)
    assert exc_info.value.index == index
    assert exc_info.value.kind == kind
    assert str(index) in str(exc_info.value)


def test_name_format_values():
    assert NameFormat("last_first") is NameFormat.LAST_FIRST
    assert len(NameFormat) == 4


def test_validate_labels_rejects_bare_string():
    with pytest.raises(InvalidInputKind) as exc_info:
        validate_labels("readme")
    assert exc_info.value.index is None
    assert "bare 'str'" in str(exc_info.value)
