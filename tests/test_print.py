# tests/test_print.py
from doublespairing.pairing import Pair, PairingEngine
from doublespairing.utils.print import format_round, format_schedule, schedule_to_html

ROUND = (Pair("A", "B"), Pair("C", "D"), Pair("E", "F"), Pair("G", "H"))


def test_format_round_uses_two_tables():
    assert format_round(1, ROUND) == (
        "Round 1\n"
        "    Table 1: A and B vs C and D.\n"
        "    Table 2: E and F vs G and H."
    )


def test_format_schedule_numbers_rounds(numbered_engine):
    text = format_schedule(numbered_engine.generate_schedule())
    assert text.count("Round ") == 7
    assert text.startswith("Round 1\n    Table 1: 1 and 2 vs 3 and 4.")
    assert "Round 7\n    Table 1: 1 and 8 vs 2 and 7." in text
    assert "\n\nRound 2\n" in text


def test_html_escapes_names():
    rnd = (Pair("<b>", "B"), Pair("C", "D"), Pair("E", "F"), Pair("G", "H"))
    html = schedule_to_html((rnd,), title="Club & Friends")
    assert "&lt;b&gt; and B" in html
    assert "<b> and B" not in html
    assert "Club &amp; Friends" in html
    assert "Round 1" in html


def test_html_has_a_table_per_round(named_schedule):
    html = schedule_to_html(named_schedule)
    assert html.count("<table class='pairings'>") == 7
    assert "<td>Alice and Bob</td><td>Charlie and Daniel</td>" in html


def test_numeric_player_ids_are_printed():
    schedule = PairingEngine(range(1, 9)).generate_schedule()
    text = format_schedule(schedule)
    assert text.startswith("Round 1\n    Table 1: 1 and 2 vs 3 and 4.")
    assert "<td>1 and 2</td><td>3 and 4</td>" in schedule_to_html(schedule)
