import io

import pytest

from cssbuilder import SelectorWriter
from cssbuilder import builder


def test_writes_a_single_selector_to_a_text_stream():
    output = io.StringIO()

    SelectorWriter(output=output).write(builder.element("a").class_("b"))

    assert output.getvalue() == "a.b\n"


def test_writes_a_selector_list():
    output = io.StringIO()

    SelectorWriter(output=output).write([builder.element("a"), builder.class_("b"), "p > em"])

    assert output.getvalue() == "a,\n.b,\np > em\n"


def test_writes_utf8_to_a_binary_stream():
    output = io.BytesIO()

    SelectorWriter(output=output).write(builder.class_("café"))

    assert output.getvalue() == ".café\n".encode("utf-8")


def test_rejects_unknown_values():
    with pytest.raises(ValueError):
        SelectorWriter(output=io.StringIO()).write(42)
