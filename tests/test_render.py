from .base import DATA
from tidyini import (
    Dictionary,
    Parameters,
    IniError,
    IniFileError,
    IniRenderError,
    load,
    load_string,
    render,
    write,
)
import pytest


def build() -> Dictionary:
    dictionary = load(DATA / "empty.ini")
    dictionary.set_bool("", "key1", True)
    dictionary.set_string("section1", "key1", "value2")
    dictionary.set_int("section1", "key2", 5)
    dictionary.set_double("section1", "key3", 1.3)
    dictionary.set_double("section2", "key1", 5.0)
    return dictionary


class TestRender:

    def test_write(self, tmp_path):
        dictionary = load(DATA / "empty.ini")
        dictionary.set_string("", "key", "value")
        path = tmp_path / "out.ini"
        write(path, dictionary)
        assert path.read_bytes() == b"key = value\n\n"

    def test_write_overwrites(self, tmp_path):
        path = tmp_path / "out.ini"
        path.write_text("[old]\nstale = 1\n" * 10)
        dictionary = Dictionary()
        dictionary.set_int("new", "fresh", 1)
        write(path, dictionary)
        assert path.read_text() == "[new]\nfresh = 1\n\n"

    def test_write_to_missing_directory(self, tmp_path):
        with pytest.raises(IniFileError) as exc_info:
            write(tmp_path / "missing" / "out.ini", Dictionary())
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_string(self):
        dictionary = build()
        assert dictionary.get_double("section2", "key1") == (5.0, True)
        stringified = str(dictionary)
        assert stringified == (
            "key1 = true\n"
            "\n"
            "[section1]\n"
            "key1 = value2\n"
            "key2 = 5\n"
            "key3 = 1.3\n"
            "\n"
            "[section2]\n"
            "key1 = 5\n"
            "\n"
        )
        assert render(dictionary) == stringified

    def test_round_trip(self):
        dictionary = build()
        new_dictionary = load_string(str(dictionary))
        assert new_dictionary.get_bool("", "key1") == (True, True)
        assert new_dictionary.get_string("section1", "key1") == ("value2", True)
        assert new_dictionary.get_int("section1", "key2") == (5, True)
        assert new_dictionary.get_double("section1", "key3") == (1.3, True)
        assert new_dictionary.get_double("section2", "key1") == (5.0, True)
        assert new_dictionary == dictionary

    def test_round_trip_through_file(self, tmp_path):
        dictionary = load(DATA / "example.ini")
        path = tmp_path / "example.ini"
        write(path, dictionary)
        assert load(path) == dictionary

    @pytest.mark.parametrize(
        "value", [0.1, -2.5, 1e100, 123456789.125, float("inf"), 1 / 3]
    )
    def test_double_round_trip(self, value):
        dictionary = Dictionary()
        dictionary.set_double("s", "k", value)
        assert load_string(render(dictionary)).get_double("s", "k") == (value, True)

    def test_empty_values(self):
        dictionary = Dictionary()
        dictionary.set_string("s", "empty", "")
        assert render(dictionary) == "[s]\nempty =\n\n"
        assert load_string(render(dictionary)).get_string("s", "empty") == ("", True)

    def test_empty_dictionary(self):
        assert render(Dictionary()) == ""

    def test_declared_empty_section(self):
        dictionary = load_string("[empty]\n")
        assert render(dictionary) == "[empty]\n\n"

    def test_top_level_first(self):
        dictionary = Dictionary()
        dictionary.set_string("named", "a", "1")
        dictionary.set_string("", "b", "2")
        assert render(dictionary) == "b = 2\n\n[named]\na = 1\n\n"

    def test_custom_delimiter(self):
        dictionary = Dictionary(Parameters(option_delimiter=":"))
        dictionary.set_string("s", "url", "a=b")
        assert render(dictionary) == "[s]\nurl : a=b\n\n"

    @pytest.mark.parametrize("separator", ["\x0c", "\u2028", "\r"])
    def test_round_trip_inner_control_characters(self, separator):
        dictionary = Dictionary()
        dictionary.set_string("s", "k", f"a{separator}b")
        new_dictionary = load_string(render(dictionary))
        assert new_dictionary.get_string("s", "k") == (f"a{separator}b", True)
        assert new_dictionary.keys("s") == ["k"]

    @pytest.mark.parametrize(
        "section,key,value",
        [
            ("", "", "v"),
            ("s", "[x", "v"),
            ("s", "; hidden", "v"),
            ("s", "#hidden", "v"),
            ("s", "a = b", "v"),
            ("s", " padded", "v"),
            ("s", "k", " padded"),
            ("s", "k", "padded\t"),
            ("s", "k", "two\nlines"),
            ("s", "two\nlines", "v"),
            (" padded", "k", "v"),
            ("two\nlines", "k", "v"),
        ],
    )
    def test_unrenderable_entries(self, section, key, value):
        dictionary = Dictionary()
        dictionary.set_string(section, key, value)
        with pytest.raises(IniRenderError):
            render(dictionary)

    def test_render_error_names_section(self):
        dictionary = Dictionary()
        dictionary.set_string("wine", "", "v")
        with pytest.raises(IniError, match="wine"):
            str(dictionary)

    def test_key_with_inactive_comment_prefix(self):
        dictionary = Dictionary(Parameters(comment_prefixes="!"))
        dictionary.set_string("s", "; kept", "v")
        assert load_string(render(dictionary), Parameters(comment_prefixes="!")) == dictionary

    def test_write_leaves_file_untouched_on_render_error(self, tmp_path):
        path = tmp_path / "out.ini"
        path.write_text("key = old\n")
        dictionary = Dictionary()
        dictionary.set_string("", "", "new")
        with pytest.raises(IniRenderError):
            write(path, dictionary)
        assert path.read_text() == "key = old\n"
