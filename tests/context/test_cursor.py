from wordls.context.cursor import CursorContext, resolve_cursor


def test_dotted_path_at_end_of_line():
    context = resolve_cursor("foo.bar.baz", 0, 11)

    assert context.lead_up == ["foo", "bar"]
    assert context.partial == "baz"


def test_second_line():
    context = resolve_cursor("x = 1\nfoo.b", 1, 5)

    assert context.partial == "b"
    assert context.lead_up == ["foo"]


def test_middle_of_word():
    """Only the characters before the cursor belong to the partial word."""
    context = resolve_cursor("foo.bar.baz", 0, 10)

    assert context.partial == "ba"
    assert context.lead_up == ["foo", "bar"]


def test_right_after_dot():
    context = resolve_cursor("foo.", 0, 4)

    assert context.partial == ""
    assert context.lead_up == ["foo"]


def test_start_of_line():
    assert resolve_cursor("foo bar", 0, 0) == CursorContext("", [])


def test_other_delimiter_resets_lead_up():
    context = resolve_cursor("foo.bar baz", 0, 11)

    assert context.partial == "baz"
    assert context.lead_up == []


def test_lead_up_is_taken_from_whole_line():
    """The partial stops at the cursor, the lead-up follows the rest of the line."""
    context = resolve_cursor("foo.ba zz", 0, 6)

    assert context.partial == "ba"
    assert context.lead_up == []


def test_lead_up_keeps_growing_after_cursor():
    context = resolve_cursor("foo.bar.baz", 0, 7)

    assert context.partial == "bar"
    assert context.lead_up == ["foo", "bar"]
    assert context.dotted == "foo.bar.bar"


def test_lead_up_past_end_of_line():
    context = resolve_cursor("foo.bar", 0, 40)

    assert context.partial == ""
    assert context.lead_up == ["foo"]


def test_lead_up_stops_at_end_of_target_line():
    context = resolve_cursor("a.b\nc.d.e", 0, 40)

    assert context.lead_up == ["a"]


def test_end_of_line_before_newline():
    context = resolve_cursor("abc\ndef", 0, 3)

    assert context.partial == "abc"


def test_one_past_end_of_final_line():
    assert resolve_cursor("abc", 0, 4).partial == "abc"
    assert resolve_cursor("x\nabc", 1, 4).partial == "abc"


def test_far_past_end_of_line():
    assert resolve_cursor("abc", 0, 40) == CursorContext("", [])


def test_line_beyond_document():
    assert resolve_cursor("abc\ndef", 5, 1) == CursorContext("", [])


def test_empty_text():
    assert resolve_cursor("", 0, 0) == CursorContext("", [])


def test_earlier_lines_do_not_leak():
    context = resolve_cursor("alpha.beta\ngam", 1, 3)

    assert context.partial == "gam"
    assert context.lead_up == []


def test_dotted():
    assert resolve_cursor("foo.bar.baz", 0, 11).dotted == "foo.bar.baz"
    assert CursorContext("x", []).dotted == "x"
