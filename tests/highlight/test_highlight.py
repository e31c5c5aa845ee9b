from sqltrace.colors import BLUE, CYAN, GREEN, RESET
from sqltrace.highlight import highlight
from sqltrace.util import strip_ansi


def test_keywords_are_upper_cased_and_colored() -> None:
    # Arrange
    statement = "select name from users where id = 1"

    # Act
    highlighted = highlight(statement)

    # Assert
    assert highlighted == (
        f"{BLUE}SELECT{RESET} name {BLUE}FROM{RESET} users {BLUE}WHERE{RESET} id = {CYAN}1{RESET}"
    )


def test_keywords_only_match_whole_words() -> None:
    highlighted = highlight("SELECT selected, fromage FROM menu")
    assert strip_ansi(highlighted) == "SELECT selected, fromage FROM menu"
    assert f"{BLUE}selected" not in highlighted
    assert f"{BLUE}FROM{RESET} menu" in highlighted


def test_string_literals_are_colored() -> None:
    highlighted = highlight("SELECT * FROM users WHERE name = 'John' OR nick = \"Johnny\"")
    assert f"{GREEN}'John'{RESET}" in highlighted
    assert f'{GREEN}"Johnny"{RESET}' in highlighted


def test_numbers_are_colored() -> None:
    highlighted = highlight("SELECT * FROM users WHERE id = 123 LIMIT 10")
    assert f"{CYAN}123{RESET}" in highlighted
    assert f"{CYAN}10{RESET}" in highlighted


def test_digits_inside_identifiers_are_left_alone() -> None:
    highlighted = highlight("SELECT col1 FROM table2")
    assert "col1" in highlighted
    assert "table2" in highlighted
    assert CYAN not in highlighted


def test_highlighting_keeps_the_text() -> None:
    statement = "INSERT INTO products (name, price) VALUES ('Lamp', 25)"
    assert strip_ansi(highlight(statement)) == statement


def test_highlight_is_deterministic() -> None:
    statement = "SELECT COUNT(*) FROM orders WHERE status IN ('open', 'held') AND total > 100"
    assert highlight(statement) == highlight(statement)


def test_malformed_statements_do_not_raise() -> None:
    assert strip_ansi(highlight("")) == ""
    assert strip_ansi(highlight("   \n\t  ")) == "   \n\t  "
    assert strip_ansi(highlight("SELECT * FROM users WHERE name = 'O''Reilly'")).endswith("'O''Reilly'")
    assert strip_ansi(highlight("SELECT 'unterminated FROM")) == "SELECT 'unterminated FROM"
    assert "column" in highlight("SELECT " + "column," * 5000 + " id FROM users")
