import pytest

import sexp


def test_codec_defaults():
    codec = sexp.Codec()
    assert codec.cast_numbers is True
    assert codec.pretty_print is True
    assert codec.forced_string_escape is False
    assert codec.options == sexp.DEFAULT_OPTIONS


def test_codec_initial_options():
    codec = sexp.Codec(sexp.Options(cast_numbers=False))
    assert codec.cast_numbers is False
    assert codec.parse("(1)") == ["1"]


def test_codec_set_cast_numbers():
    codec = sexp.Codec()
    assert codec.parse("(1 2.5)") == [1, 2.5]
    codec.cast_numbers = False
    assert codec.parse("(1 2.5)") == ["1", "2.5"]


def test_codec_set_pretty_print():
    codec = sexp.Codec()
    assert codec.serialize([["x"]]) == "(\n  (x))"
    codec.pretty_print = False
    assert codec.serialize([["x"]]) == "((x))"


def test_codec_set_forced_string_escape():
    codec = sexp.Codec()
    codec.forced_string_escape = True
    assert codec.forced_string_escape is True
    assert codec.serialize(["a", "b"]) == '(a "b")'


def test_codec_setter_coerces_to_bool():
    codec = sexp.Codec()
    codec.pretty_print = 0
    assert codec.pretty_print is False


def test_codec_mutation_replaces_options():
    codec = sexp.Codec()
    before = codec.options
    codec.cast_numbers = False
    assert before.cast_numbers is True
    assert codec.options is not before


def test_codec_serialize_depth():
    codec = sexp.Codec()
    assert codec.serialize(["x"], 1) == "\n  (x)"


def test_codec_does_not_touch_default_options():
    codec = sexp.Codec()
    codec.cast_numbers = False
    assert sexp.DEFAULT_OPTIONS.cast_numbers is True
    assert sexp.parse("(1)") == [1]


def test_codec_repr():
    assert repr(sexp.Codec()) == "Codec(Options(cast_numbers=True, pretty_print=True, forced_string_escape=False))"


def test_codec_parse_errors_propagate():
    with pytest.raises(sexp.MalformedExpression):
        sexp.Codec().parse("(")
