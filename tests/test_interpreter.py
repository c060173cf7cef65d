import pytest

from owl.errors import OwlRecursionError, OwlTypeError, OwlSyntaxError
from owl.interpreter import Interpreter, run
from owl.types.value import NONE, Number, Str


def test_definitions_persist_across_eval(interp):
    interp.eval("(def x 5)")
    assert interp.eval("(+ x 1)") == Number(6)


def test_one_shot_run_uses_fresh_environment():
    assert run("(def x 5) x") == Number(5)
    assert run("x") is NONE


def test_errors_do_not_poison_interpreter(interp):
    interp.eval("(fun f (a) (+ a #t))")
    with pytest.raises(OwlTypeError):
        interp.eval("(f 1)")
    assert interp.env.depth == 1
    assert interp.eval("(+ 2 2)") == Number(4)


def test_parse_errors_surface(interp):
    with pytest.raises(OwlSyntaxError):
        interp.eval("(def x")


def test_unbounded_recursion_is_reported(interp):
    interp.eval("(fun forever (n) (forever n))")
    with pytest.raises(OwlRecursionError):
        interp.eval("(forever 1)")
    assert interp.env.depth == 1
    assert interp.eval('"still alive"') == Str("still alive")


def test_run_file(tmp_path, interp):
    script = tmp_path / "prog.owl"
    script.write_text("(fun sq (x) (* x x))\n(sq 9)\n", encoding="utf-8")
    assert interp.run_file(script) == Number(81)


def test_run_file_missing(tmp_path, interp):
    with pytest.raises(OSError):
        interp.run_file(tmp_path / "missing.owl")


def test_deeply_nested_source_is_syntax_error(interp):
    with pytest.raises(OwlSyntaxError, match="nests too deeply"):
        interp.eval("(" * 5000 + ")" * 5000)
    assert interp.eval("(+ 1 1)") == Number(2)


def test_deeply_nested_eval_string_is_syntax_error(interp):
    interp.eval('(def src "' + "(list " * 5000 + ")" * 5000 + '")')
    with pytest.raises(OwlSyntaxError):
        interp.eval("(eval src)")
