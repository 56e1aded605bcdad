import logging

from cssbuilder.command import build, run


def test_builds_a_compound_selector(capsys):
    result = run(["-e", "a", "-a", 'href$=".png"', "-p", "focus"])

    assert result == ['a[href$=".png"]:focus']
    assert capsys.readouterr().out == 'a[href$=".png"]:focus\n'


def test_combines_selectors(capsys):
    result = run(["-e", "div", "-i", "main", "-C", "+", "-e", "a", "-C", ">", "-c", "icon"])

    assert result == ["div#main + a > .icon"]


def test_groups_selectors(capsys):
    result = run(["-e", "h1", "-g", "-e", "h2", "-c", "title"])

    assert result == ["h1", "h2.title"]
    assert capsys.readouterr().out == "h1,\nh2.title\n"


def test_out_of_order_fragments_fail(capsys):
    assert run(["-c", "a", "-e", "div"]) is None
    assert capsys.readouterr().out == ""


def test_duplicate_fragments_fail(capsys):
    assert run(["-i", "a", "-i", "b"]) is None


def test_no_fragments_prints_usage(capsys):
    assert run([]) == []
    assert "cssbuilder" in capsys.readouterr().err


def test_writes_to_output_file(tmp_path):
    path = tmp_path / "selector.txt"

    run(["-e", "p", "-P", "first-line", "-o", str(path)])

    assert path.read_text() == "p::first-line\n"


def test_build_keeps_trailing_combined_selector():
    selectors = build([("element", "ul"), ("combine", ">")])

    assert [_.render() for _ in selectors] == ["ul"]


def test_group_keeps_selector_ending_with_combinator(capsys):
    assert run(["-e", "a", "-C", ">", "-g", "-e", "b"]) == ["a", "b"]


def test_combinator_without_selector_is_reported(caplog):
    selectors = build([("combine", "+"), ("element", "a"), ("combine", ">"), ("combine", "~"), ("element", "b")])

    assert [_.render() for _ in selectors] == ["a > b"]
    assert caplog.text.count("Ignoring combinator") == 2


def test_output_file_is_utf8(tmp_path):
    path = tmp_path / "selector.txt"

    run(["-c", "café", "-o", str(path)])

    assert path.read_bytes() == ".café\n".encode("utf-8")


def test_verbose_logs_each_fragment(caplog, capsys):
    root = logging.getLogger()
    level = root.level
    try:
        assert run(["-v", "-e", "div", "-c", "x"]) == ["div.x"]
    finally:
        root.setLevel(level)

    assert "Adding element `div`" in caplog.text
    assert "Adding class `x`" in caplog.text
