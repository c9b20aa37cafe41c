from core.ini import parse_ini_file, parse_ini_string


def test_parses_simple_pairs():
    assert parse_ini_string("greeting = Hello\nfarewell = Bye") == {
        "greeting": "Hello",
        "farewell": "Bye",
    }


def test_skips_comments_blank_and_invalid_lines():
    text = "; comment\n# another\n\nno separator here\n = orphan value\nkey=value\n"
    assert parse_ini_string(text) == {"key": "value"}


def test_last_duplicate_wins():
    assert parse_ini_string("a = 1\na = 2\n") == {"a": "2"}


def test_values_stay_strings():
    result = parse_ini_string("count = 10\nflag = true\nempty =\n")
    assert result == {"count": "10", "flag": "true", "empty": ""}


def test_value_keeps_later_equals_signs():
    assert parse_ini_string("formula = a = b\n") == {"formula": "a = b"}


def test_quotes_are_removed():
    text = "title = \"Hello, world\"\nname = 'x'\nhalf = \"open\n"
    assert parse_ini_string(text) == {
        "title": "Hello, world",
        "name": "x",
        "half": "\"open",
    }


def test_sections_are_flattened():
    text = "[menu]\nhome = Home\n[footer]\ncopyright = (c)\nhome = Start\n"
    assert parse_ini_string(text) == {"home": "Start", "copyright": "(c)"}


def test_parse_file_handles_utf8_and_bom(tmp_path):
    path = tmp_path / "fa.ini"
    path.write_text("\ufeffgreeting = سلام\r\nfarewell = خداحافظ\r\n", encoding="utf-8")
    assert parse_ini_file(path) == {"greeting": "سلام", "farewell": "خداحافظ"}


def test_inline_comment_ends_unquoted_value():
    assert parse_ini_string("greeting = Hello ; note\nplain = Bye;\n") == {
        "greeting": "Hello",
        "plain": "Bye",
    }


def test_inline_semicolon_kept_inside_quotes():
    text = "greeting = \"Hello ; world\" ; note\nname = 'a;b'\n"
    assert parse_ini_string(text) == {"greeting": "Hello ; world", "name": "a;b"}
