"""
End-to-end tests for the reorder facade.
"""

import pytest

from goreorder import (
    ParserError,
    UnmatchedSectionError,
    analyze_section_order,
    reorder_source,
    reorder_source_detailed,
)
from goreorder.config import config_from_dict
from goreorder.schemas import DEFAULT_SECTION_ORDER

pytestmark = pytest.mark.fast

FIXTURES = ["kitchen_sink", "remote_methods", "generics"]


def assert_in_order(text: str, fragments):
    positions = []
    for fragment in fragments:
        assert fragment in text, f"missing {fragment!r}"
        positions.append(text.index(fragment))
    assert positions == sorted(positions), f"out of order: {fragments}"


class TestScenarios:
    def test_main_then_constants_then_helpers(self):
        src = '''package main

func helper() {}

const Version = "1.0"

func main() {}
'''
        assert reorder_source(src) == '''package main

func main() {}

// Exported constants.
const (
	Version = "1.0"
)

func helper() {}
'''

    def test_type_grouped_with_constructor_and_method(self):
        src = '''package server

func (s *Server) Start() {}

type Server struct{}

func NewServer() *Server {
	return &Server{}
}
'''
        assert reorder_source(src) == '''package server

type Server struct{}

func NewServer() *Server {
	return &Server{}
}

func (s *Server) Start() {}
'''

    def test_drop_removes_unreferenced_constant(self):
        src = '''package main

import "fmt"

const Version = "1.0"

func main() { fmt.Println("hi") }
'''
        config = config_from_dict({"sections": {"order": ["imports", "main"]}, "behavior": {"mode": "drop"}})
        out = reorder_source(src, config)
        assert "Version" not in out
        assert out == 'package main\n\nimport "fmt"\n\nfunc main() { fmt.Println("hi") }\n'

    def test_strict_names_missing_section(self):
        order = [s for s in DEFAULT_SECTION_ORDER if s != "unexported_funcs"]
        config = config_from_dict({"sections": {"order": order}})
        with pytest.raises(UnmatchedSectionError) as excinfo:
            reorder_source("package x\n\nfunc helper() {}\n", config)
        assert "unexported_funcs" in str(excinfo.value)


class TestEnums:
    def test_enum_group_output(self):
        src = '''package color

func (c Color) String() string {
	return "color"
}

const (
	Red Color = iota
	Green
	Blue
)

type Color int
'''
        assert reorder_source(src) == '''package color

type Color int

// Color values.
const (
	Red Color = iota
	Green
	Blue
)

func (c Color) String() string {
	return "color"
}
'''

    def test_untyped_iota_stays_constant(self):
        src = "package x\n\nconst (\n\tA = iota\n\tB\n)\n"
        out = reorder_source(src)
        assert "// Exported constants." in out
        assert "values." not in out

    def test_user_doc_on_enum_block_survives(self):
        src = '''package p

type Level int

// Possible values.
const (
	Low Level = iota
	High
)
'''
        expected = '''package p

type Level int

// Level values.
// Possible values.
const (
	Low Level = iota
	High
)
'''
        out = reorder_source(src)
        assert out == expected
        assert reorder_source(out) == out


class TestMainSpacing:
    def test_main_separated_from_imports(self):
        src = 'package main\nimport "fmt"\nfunc helper() {}\nfunc main() { fmt.Println() }\n'
        out = reorder_source(src)
        assert 'import "fmt"\n\nfunc main() { fmt.Println() }' in out
        assert reorder_source(out) == out


class TestComments:
    def test_trailing_comments_follow_their_specs(self):
        src = '''package x

const B = 2 // bee

const A = 1 // ay
'''
        assert reorder_source(src) == '''package x

// Exported constants.
const (
	A = 1 // ay
	B = 2 // bee
)
'''

    def test_doc_comments_follow_their_specs(self):
        src = '''package x

// B is bee.
var B = 2

// A is ay.
var A = 1
'''
        assert reorder_source(src) == '''package x

// Exported variables.
var (
	// A is ay.
	A = 1
	// B is bee.
	B = 2
)
'''

    def test_trailing_file_comment_is_kept(self, read_go):
        out = reorder_source(read_go("kitchen_sink"))
        assert out.endswith("\n\n// trailing note for the file\n")


class TestKitchenSink:
    def test_section_order(self, read_go):
        out = reorder_source(read_go("kitchen_sink"))
        assert_in_order(out, [
            "import (",
            "func init() {\n\tregistry",
            "func init() {\n\tfmt",
            "\tPi = 3.14159",
            "// Kind identifies a shape.\ntype Kind int",
            "// Kind values.\nconst (",
            "func (k Kind) String",
            "\t// ErrNegative is returned for negative sizes.\n\tErrNegative = ",
            "// Point is a 2D point.\ntype Point struct",
            "type Square struct",
            "// MustSquare panics on error.\nfunc MustSquare",
            "// NewSquare builds a square.\nfunc NewSquare",
            "func (s *Square) Area",
            "func (s *Square) scale",
            "func Describe",
            "\talpha = iota",
            "\tbeta",
            "\tmaxSide = 100 // upper bound",
            "\tdefaultSide = 1.0",
            "\tregistry = map",
            "type point3 struct",
            "func clamp",
        ])

    def test_counts(self, read_go):
        result = reorder_source_detailed(read_go("kitchen_sink"))
        assert result.input_count == result.output_count == 22


class TestProperties:
    @pytest.mark.parametrize("name", FIXTURES)
    def test_idempotent(self, read_go, name):
        once = reorder_source(read_go(name))
        assert reorder_source(once) == once

    @pytest.mark.parametrize("mode", ["warn", "append"])
    def test_idempotent_with_folding(self, read_go, mode):
        config = config_from_dict({
            "sections": {"order": ["imports", "exported_types", "uncategorized"]},
            "behavior": {"mode": mode},
        })
        once = reorder_source(read_go("kitchen_sink"), config)
        assert reorder_source(once, config) == once

    @pytest.mark.parametrize("name", FIXTURES)
    def test_deterministic(self, read_go, name):
        src = read_go(name)
        assert reorder_source(src) == reorder_source(src)

    def test_conservation_in_append_mode(self, read_go):
        config = config_from_dict({"sections": {"order": ["main"]}, "behavior": {"mode": "append"}})
        result = reorder_source_detailed(read_go("kitchen_sink"), config)
        assert result.input_count == result.output_count
        assert "func clamp" in result.source
        assert "alpha = iota" in result.source

    def test_init_order_preserved(self):
        src = "package x\n\nfunc init() { b() }\n\nfunc init() { a() }\n"
        out = reorder_source(src)
        assert out.index("b()") < out.index("a()")

    def test_warn_reports_warnings(self):
        config = config_from_dict({"sections": {"order": ["imports"]}, "behavior": {"mode": "warn"}})
        result = reorder_source_detailed("package x\n\nfunc helper() {}\n", config)
        assert result.unmatched_sections == ["unexported_funcs"]
        assert result.warnings
        assert "func helper() {}" in result.source


class TestParseErrors:
    def test_parse_error_propagates(self):
        with pytest.raises(ParserError) as excinfo:
            reorder_source("package x\n\nfunc {\n")
        assert excinfo.value.line is not None


class TestAnalyzeSectionOrder:
    def test_reports_positions(self):
        src = '''package main

func helper() {}

const Version = "1.0"

func main() {}
'''
        order = analyze_section_order(src)
        assert [(s.name, s.position, s.expected) for s in order.sections] == [
            ("unexported_funcs", 1, 13),
            ("exported_consts", 2, 4),
            ("main", 3, 2),
        ]
        assert order.sections[1].label == "Exported Constants"
        assert not order.in_order

    def test_ordered_file(self):
        order = analyze_section_order(reorder_source("package main\n\nfunc helper() {}\n\nfunc main() {}\n"))
        assert order.in_order

    def test_methods_count_as_types(self):
        order = analyze_section_order("package x\n\nfunc (s *Server) Run() {}\n")
        assert order.sections[0].name == "exported_types"
