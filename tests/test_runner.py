import pytest

from bfi.errors import CompileError
from bfi.runner import run_once, run_text


def test_run_text_hello():
    assert run_text("++++++++[>+++++++++<-]>.+.") == "HI"


def test_run_text_with_input():
    assert run_text(",+.,+.", "ab") == "bc"


def test_run_text_strict_raises():
    with pytest.raises(CompileError) as excinfo:
        run_text("+[.")
    assert excinfo.value.result.column == 2


def test_run_text_lenient_runs_sanitized_program():
    assert run_text("++++++++[>++++++++<-]>+.]", strict=False) == "A"


def test_run_text_passes_options():
    assert run_text("-.", cell_type="u8") == "\xff"
    assert run_text("-.", cell_type="char") == "\xff"


def test_run_once_increment():
    assert run_once(",+.", 3) == 4


def test_run_once_doubling():
    assert run_once(",[>++<-]>.", 3, cell_type="u8") == 6


def test_run_once_no_output():
    assert run_once(",", 1) is None


def test_run_once_step_limit():
    assert run_once("+[]", 0, step_limit=100) is None


def test_run_once_runtime_error():
    assert run_once("<.", 1, wraparound=False) is None
