"""Tests for the enclosing function scanners."""

from pathlib import Path

import pytest

from ctxcopy.host.definitions import (
    Definition,
    SourceDefinitionLocator,
    innermost_definition,
    scan_brace,
    scan_python,
    scanner_for,
)

PYTHON_SOURCE = '''\
import os


def outer(a,
          b):
    x = 1

    def inner():
        return x

    # comment at lower indent
    return inner


class Greeter:
    async def greet(self, name: str) -> str:
        return f"hi {name}"


def one_liner(): return 1
'''

C_SOURCE = '''\
#include <stdio.h>

static int helper(int x);

int helper(int x)
{
    if (x > 0) {
        return x;
    }
    return -x;
}

int main(void) {
    printf("%d", helper(3));
    return 0;
}
'''

JS_SOURCE = '''\
export async function load(url) {
  const res = await fetch(url);
  return res.json();
}

const double = (x) => x * 2;

class Store {
  save(item) {
    this.items.push(item);
  }
}
'''

GO_SOURCE = '''\
package main

func (s *Server) Handle(w http.ResponseWriter, r *http.Request) {
	w.Write([]byte("ok"))
}
'''

RUST_SOURCE = '''\
pub async fn fetch_all(ids: &[u32]) -> Vec<Item> {
    ids.iter().map(|id| load(*id)).collect()
}
'''


def _names(definitions: list[Definition]) -> list[str]:
    return [d.name for d in definitions]


class TestScanPython:
    def test_finds_functions_and_methods(self):
        definitions = scan_python(PYTHON_SOURCE.splitlines())
        assert _names(definitions) == ["outer", "inner", "greet", "one_liner"]

    def test_multiline_signature_span(self):
        outer = scan_python(PYTHON_SOURCE.splitlines())[0]
        assert outer.start == 4
        assert outer.end == 12

    def test_nested_span(self):
        inner = scan_python(PYTHON_SOURCE.splitlines())[1]
        assert (inner.start, inner.end) == (8, 9)

    def test_one_liner(self):
        one_liner = scan_python(PYTHON_SOURCE.splitlines())[-1]
        assert one_liner.start == one_liner.end == 20


class TestScanBrace:
    def test_c_definitions_skip_prototypes(self):
        definitions = scan_brace(C_SOURCE.splitlines())
        assert _names(definitions) == ["helper", "main"]
        helper = definitions[0]
        assert (helper.start, helper.end) == (5, 11)

    def test_control_flow_not_mistaken_for_functions(self):
        assert "if" not in _names(scan_brace(C_SOURCE.splitlines()))

    def test_javascript(self):
        definitions = scan_brace(JS_SOURCE.splitlines())
        assert _names(definitions) == ["load", "double", "save"]
        double = definitions[1]
        assert double.start == double.end == 6

    def test_go_method(self):
        (handle,) = scan_brace(GO_SOURCE.splitlines())
        assert handle.name == "Handle"
        assert (handle.start, handle.end) == (3, 5)

    def test_rust(self):
        (fetch_all,) = scan_brace(RUST_SOURCE.splitlines())
        assert fetch_all.name == "fetch_all"
        assert (fetch_all.start, fetch_all.end) == (1, 3)


class TestInnermost:
    def test_innermost_wins(self):
        definitions = [Definition("outer", 1, 20), Definition("inner", 5, 8)]
        assert innermost_definition(definitions, 6).name == "inner"
        assert innermost_definition(definitions, 10).name == "outer"

    def test_outside_everything(self):
        assert innermost_definition([Definition("f", 3, 4)], 1) is None


class TestScannerFor:
    @pytest.mark.parametrize("path,scanner", [
        ("a.py", scan_python),
        ("a.PY", scan_python),
        ("a.ts", scan_brace),
        ("a.rs", scan_brace),
    ])
    def test_known_extensions(self, path, scanner):
        assert scanner_for(path) is scanner

    def test_unknown_extension(self):
        assert scanner_for("notes.txt") is None


class TestSourceDefinitionLocator:
    def test_reads_file(self, tmp_path: Path):
        source = tmp_path / "mod.py"
        source.write_text(PYTHON_SOURCE, encoding="utf-8")
        assert SourceDefinitionLocator(str(source), 9).enclosing_function_name() == "inner"
        assert SourceDefinitionLocator(str(source), 12).enclosing_function_name() == "outer"

    def test_outside_function(self, tmp_path: Path):
        source = tmp_path / "mod.py"
        source.write_text(PYTHON_SOURCE, encoding="utf-8")
        assert SourceDefinitionLocator(str(source), 1).enclosing_function_name() is None

    def test_override(self):
        locator = SourceDefinitionLocator(None, 1, override="handler")
        assert locator.enclosing_function_name() == "handler"

    def test_no_file(self):
        assert SourceDefinitionLocator(None, 1).enclosing_function_name() is None

    def test_missing_file(self, tmp_path: Path):
        locator = SourceDefinitionLocator(str(tmp_path / "gone.py"), 1)
        assert locator.enclosing_function_name() is None

    def test_unsupported_extension(self, tmp_path: Path):
        notes = tmp_path / "notes.txt"
        notes.write_text("def not_code():\n    pass\n", encoding="utf-8")
        assert SourceDefinitionLocator(str(notes), 2).enclosing_function_name() is None
