import io

from eventadmin.adapters.terminal import StdioTerminal
from eventadmin.components.prompt import PromptEngine


def test_non_tty_masked_read_from_pipe():
    stdin = io.StringIO("Sup3rSecret!\nnext line\n")
    stdout = io.StringIO()
    terminal = StdioTerminal(stdin=stdin, stdout=stdout, stderr=io.StringIO())
    engine = PromptEngine(terminal)

    assert engine.read_secret("Enter: ") == "Sup3rSecret!"
    assert engine.read_line("Next: ") == "next line"
    assert stdout.getvalue() == "Enter: " + "*" * 12 + "\nNext: "


def test_raw_mode_is_noop_without_tty():
    terminal = StdioTerminal(stdin=io.StringIO(""), stdout=io.StringIO(), stderr=io.StringIO())
    with terminal.raw_mode():
        assert terminal.read_char() == ""


def test_write_error_uses_stderr():
    stderr = io.StringIO()
    terminal = StdioTerminal(stdin=io.StringIO(), stdout=io.StringIO(), stderr=stderr)
    terminal.write_error("oops\n")
    assert stderr.getvalue() == "oops\n"


def test_close_is_idempotent():
    terminal = StdioTerminal(stdin=io.StringIO(), stdout=io.StringIO(), stderr=io.StringIO())
    terminal.close()
    terminal.close()
    assert terminal.closed is True


def test_crlf_after_masked_read_does_not_leak_into_next_line():
    stdin = io.StringIO("Sup3rSecret!\r\n2\r\n")
    terminal = StdioTerminal(stdin=stdin, stdout=io.StringIO(), stderr=io.StringIO())
    engine = PromptEngine(terminal)

    assert engine.read_secret("Enter: ") == "Sup3rSecret!"
    assert engine.read_line("Select an option: ") == "2"


def test_crlf_between_masked_reads():
    stdin = io.StringIO("Abcdefghi1\r\nAbcdefghi1\r\n")
    terminal = StdioTerminal(stdin=stdin, stdout=io.StringIO(), stderr=io.StringIO())
    engine = PromptEngine(terminal)

    assert engine.read_secret("Password: ") == "Abcdefghi1"
    assert engine.read_secret("Confirm: ") == "Abcdefghi1"


def test_blank_line_after_lf_terminated_secret_is_kept():
    stdin = io.StringIO("Sup3rSecret!\n\n")
    terminal = StdioTerminal(stdin=stdin, stdout=io.StringIO(), stderr=io.StringIO())
    engine = PromptEngine(terminal)

    assert engine.read_secret("Enter: ") == "Sup3rSecret!"
    assert terminal.read_line() == "\n"
