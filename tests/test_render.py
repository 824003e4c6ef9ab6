"""Unit tests for classification, encoding policies and line composition."""

import io

from kv_log.render import (
    classify,
    compose,
    prefix_drop,
    render_line,
    skip_pair,
    substitute,
)
from kv_log.text import to_text


class Stringer:
    def __str__(self):
        return "I'M A STRING"


class ReprOnly:
    def __repr__(self):
        return "ReprOnly()"


class Boom:
    def __str__(self):
        raise RuntimeError("nope")


def test_to_text_dispatch():
    """str as is, __str__ when defined, repr otherwise, never raises."""
    assert to_text("plain") == "plain"
    assert to_text(Stringer()) == "I'M A STRING"
    assert to_text(123) == "123"
    assert to_text(ReprOnly()) == "ReprOnly()"
    assert to_text(Boom()) == "<unprintable Boom object>"


def test_classify_extracts_message_and_level():
    """msg and level/lvl are removed from the pairs; the rest keep order."""
    c = classify(["p1", 1, "msg", "hello", "lvl", "warn", "p2", 2])
    assert c.message == "hello"
    assert c.level == "warn"
    assert c.pairs == [("p1", 1), ("p2", 2)]


def test_classify_last_write_wins():
    """Repeated msg/level keys keep the last value."""
    c = classify(["msg", "first", "level", "info", "msg", "second", "lvl", "error"])
    assert c.message == "second"
    assert c.level == "error"
    assert c.pairs == []


def test_classify_converts_message_and_level_to_text():
    """Non-string message and level values go through to_text."""
    c = classify(["msg", Stringer(), "level", 3])
    assert c.message == "I'M A STRING"
    assert c.level == "3"


def test_compose_separators():
    """Segments join with ': ' and empty segments are left out."""
    assert compose("", "", "") == ""
    assert compose("warn", "", "") == "warn"
    assert compose("", "the message", "") == "the message"
    assert compose("", "", "p1=1") == "p1=1"
    assert compose("warn", "", "p1=1") == "warn: p1=1"
    assert compose("warn", "the message", "p1=1") == "warn: the message: p1=1"


def test_render_line_examples():
    """Full rendering of typical events."""
    assert render_line(["msg", "the message"]) == "the message"
    assert render_line(["msg", "the message", "p1", 1, "lvl", "error"]) == "error: the message: p1=1"
    assert render_line(["msg", "the message", "p1", 1, "lvl", "warn", "p2", "param 2"]) == (
        'warn: the message: p1=1 p2="param 2"'
    )
    assert render_line(["p1", 1]) == "p1=1"
    assert render_line([]) == ""


def test_message_appears_once_and_not_in_fragment():
    """The message is a line segment, never a msg= pair."""
    line = render_line(["a", 1, "msg", "unique text", "b", 2])
    assert line.count("unique text") == 1
    assert "msg=" not in line
    assert line == "unique text: a=1 b=2"


def test_prefix_drop_hides_bad_pair_and_everything_before_it():
    """An unencodable value drops itself and earlier pairs; later ones render."""
    pairs = [("p0", 0), ("p1", io.StringIO()), ("p2", 2)]
    assert prefix_drop(pairs) == "p2=2"
    assert render_line(["p1", io.StringIO(), "p2", 2]) == "p2=2"


def test_prefix_drop_can_end_empty():
    """If the last pair is bad nothing is left to render."""
    assert prefix_drop([("p1", 1), ("p2", [1, 2])]) == ""
    assert render_line(["msg", "m", "p1", 1, "p2", [1, 2]]) == "m"


def test_substitute_writes_error_text():
    """The substitute policy keeps the pair with the error as its value."""
    line = render_line(["msg", "the message", "p1", io.StringIO(), "p2", 2], substitute)
    assert line == 'the message: p1="unsupported value type" p2=2'


def test_substitute_still_drops_on_invalid_key():
    """Key errors cannot be substituted and fall back to front truncation."""
    assert render_line(["", 1, "p2", 2], substitute) == "p2=2"


def test_skip_pair_isolates_failures():
    """skip_pair omits only the offending pair."""
    assert skip_pair([("a", 1), ("b", io.StringIO()), ("c", 3)]) == "a=1 c=3"
    assert render_line(["a", 1, "b", io.StringIO(), "c", 3], skip_pair) == "a=1 c=3"


def test_unencodable_message_uses_fallback_text():
    """A handle used as the message renders through repr instead of failing."""
    line = render_line(["msg", io.StringIO()])
    assert line.startswith("<_io.StringIO object")
