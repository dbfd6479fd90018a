"""Unit tests for the token template formatter."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tokenlog.core import LogLevel, LogRecord
from tokenlog.formatting import FormatToken, MessageFormatter
from tokenlog.kernel.time import FrozenClock


def make_record(message: object = "ready", level: LogLevel = LogLevel.INFO, **overrides: object) -> LogRecord:
    fields: dict[str, object] = {
        "level": level,
        "message": message,
        "subsystem": "com.example.app",
        "category": "Network",
        "thread": "MainThread",
        "file": "/Users/dev/App/Sources/AppDelegate.swift",
        "function": "applicationDidFinishLaunching",
        "line": 42,
    }
    fields.update(overrides)
    return LogRecord(**fields)  # type: ignore[arg-type]


# Characters that are never token identifiers.
_PLAIN = st.text(alphabet="abeghjkoqrtuvwxy 0123456789.,:[]()<>-_\t\n$%", max_size=60)


# ---------------------------------------------------------------------------
# Token set
# ---------------------------------------------------------------------------


class TestFormatToken:
    def test_lookup_known(self) -> None:
        assert FormatToken.lookup("L") is FormatToken.LEVEL
        assert FormatToken.lookup("n") is FormatToken.FILE_NAME_FULL

    @pytest.mark.parametrize("identifier", ["", "x", "LM", "$", "5"])
    def test_lookup_unknown(self, identifier: str) -> None:
        assert FormatToken.lookup(identifier) is None

    def test_marker(self) -> None:
        assert FormatToken.MESSAGE.marker == "$M"

    def test_token_set_is_closed(self) -> None:
        assert {t.value for t in FormatToken} == set("LMSCTNnFlUDdZzI")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_level_and_message(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record("ready"), "[$L] $M") == "[INFO] ready"

    @pytest.mark.parametrize(
        ("level", "label"),
        [
            (LogLevel.DEBUG, "DEBUG"),
            (LogLevel.INFO, "INFO"),
            (LogLevel.WARNING, "WARNING"),
            (LogLevel.ERROR, "ERROR"),
        ],
    )
    def test_level_labels(self, formatter: MessageFormatter, level: LogLevel, label: str) -> None:
        assert formatter.render(make_record(level=level), "$L") == label

    def test_context_fields(self, formatter: MessageFormatter) -> None:
        rendered = formatter.render(make_record(), "<$T> $N.$F:$l [$C ($S)]")
        assert rendered == "<MainThread> AppDelegate.applicationDidFinishLaunching:42 [Network (com.example.app)]"

    def test_full_file_name(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "$n") == "AppDelegate.swift"

    def test_file_name_without_directory(self, formatter: MessageFormatter) -> None:
        record = make_record(file="main.py")
        assert formatter.render(record, "$N|$n") == "main|main.py"

    def test_message_of_any_type(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(["a", 1]), "$M") == "['a', 1]"
        assert formatter.render(make_record(None), "$M") == "None"

    def test_message_stringified_at_render_time(self, formatter: MessageFormatter) -> None:
        class Late:
            renders = 0

            def __str__(self) -> str:
                Late.renders += 1
                return f"render #{Late.renders}"

        record = make_record(Late())
        assert Late.renders == 0
        assert formatter.render(record, "$M") == "render #1"
        assert formatter.render(record, "$M") == "render #2"

    def test_multiline_message_is_trimmed_only_at_edges(self, formatter: MessageFormatter) -> None:
        record = make_record("first\n- second\n")
        assert formatter.render(record, "\n[$L] $M\n\n") == "[INFO] first\n- second"

    def test_every_token_once(self, fake_clock: FrozenClock) -> None:
        fake_clock.advance(seconds=4, milliseconds=500)
        formatter = MessageFormatter(clock=fake_clock)
        template = "$Z%Y-%m-%d %H:%M:%S$z|$U|$L|$T|$N|$n|$F|$l|$C|$S|$M"
        assert formatter.render(make_record("done"), template) == (
            "2026-01-01 12:00:04|00:00:04.500|INFO|MainThread|AppDelegate|AppDelegate.swift"
            "|applicationDidFinishLaunching|42|Network|com.example.app|done"
        )

    def test_escape_token_emits_only_its_text(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "$Iplain text") == "plain text"


# ---------------------------------------------------------------------------
# Literal passthrough
# ---------------------------------------------------------------------------


class TestLiteralPassthrough:
    def test_empty_template(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "") == ""

    def test_whitespace_template(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "  \n\t ") == ""

    def test_template_without_tokens(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "  just text \n") == "just text"

    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("cost $5", "cost $5"),
            ("$x marks", "$x marks"),
            ("a$$b", "a$$b"),
            ("trailing $", "trailing $"),
            ("$", "$"),
            ("[$L] $q$M", "[INFO] $qready"),
        ],
    )
    def test_unknown_markers_are_kept(self, formatter: MessageFormatter, template: str, expected: str) -> None:
        assert formatter.render(make_record("ready"), template) == expected

    @given(template=_PLAIN)
    def test_no_recognized_tokens_renders_trimmed_template(self, template: str) -> None:
        formatter = MessageFormatter()
        assert formatter.render(make_record(), template) == template.strip()


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


class TestDates:
    def test_utc_date(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "$Z%Y-%m-%d %H:%M$z UTC") == "2026-01-01 12:00 UTC"

    def test_local_date(self, fake_clock: FrozenClock, formatter: MessageFormatter) -> None:
        expected = fake_clock.now().astimezone().strftime("%Y-%m-%d %H:%M")
        assert formatter.render(make_record(), "$D%Y-%m-%d %H:%M$d") == expected

    def test_pattern_is_not_emitted_literally(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record("m"), "$Z%H$z [$L] $M") == "12 [INFO] m"

    def test_close_token_keeps_its_remainder(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "$Z%M$z after") == "00 after"

    def test_open_without_close_uses_rest_as_pattern(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "$Z%Y rest") == "2026 rest"

    def test_same_kind_pairs_by_identifier(self, formatter: MessageFormatter) -> None:
        # Two UTC opens back to back each take the text up to the next token.
        assert formatter.render(make_record(), "$Z%H$Z%M$z") == "1200"

    def test_close_without_open(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "x $d y") == "x  y"

    def test_record_timestamp_wins_over_formatter_clock(self, formatter: MessageFormatter) -> None:
        stamped = make_record(timestamp=datetime(2024, 6, 30, 8, 15, tzinfo=UTC))
        assert formatter.render(stamped, "$Z%Y-%m-%d %H:%M$z") == "2024-06-30 08:15"


# ---------------------------------------------------------------------------
# Uptime
# ---------------------------------------------------------------------------


class TestUptime:
    def test_zero(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(), "$U") == "00:00:00.000"

    def test_hours_are_not_wrapped(self, formatter: MessageFormatter) -> None:
        record = make_record(uptime=27 * 3600 + 3 * 60 + 4.25)
        assert formatter.render(record, "$U") == "27:03:04.250"

    def test_milliseconds_are_truncated(self, formatter: MessageFormatter) -> None:
        assert formatter.render(make_record(uptime=1.0019), "$U") == "00:00:01.001"
        assert formatter.render(make_record(uptime=1.001), "$U") == "00:00:01.001"

    def test_read_from_record_not_formatter_clock(self, fake_clock: FrozenClock) -> None:
        formatter = MessageFormatter(clock=fake_clock)
        fake_clock.advance(hours=5)
        assert formatter.render(make_record(uptime=2.5), "$U [$L]") == "00:00:02.500 [INFO]"
