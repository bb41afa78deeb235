import sexp


def test_pretty_nested():
    assert sexp.serialize([["x"]]) == "(\n  (x))"


def test_pretty_outer_form_unprefixed():
    assert sexp.serialize(["a", "b"]) == "(a b)"


def test_pretty_indent_grows_with_depth():
    assert sexp.serialize(["a", ["b", ["c"]], "d"]) == "(a \n  (b \n    (c)) d)"


def test_pretty_start_depth():
    assert sexp.serialize(["x"], 2) == "\n    (x)"


def test_pretty_disabled():
    options = sexp.Options(pretty_print=False)
    assert sexp.serialize(["a", ["b", ["c"]], "d"], options=options) == "(a (b (c)) d)"


def test_pretty_output_parses_back():
    value = ["root", ["child", "1"], ["child", ["leaf", "x"]]]
    options = sexp.Options(cast_numbers=False)
    assert sexp.parse(sexp.serialize(value), options) == value
