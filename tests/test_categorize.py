"""
Tests for declaration categorization, sorting and section identification.
"""

import pytest

from goreorder.categorize import (
    categorize_declarations,
    identify_section,
    is_exported,
    sort_categorized,
)
from goreorder.parser import parse_source
from goreorder.schemas import Section

pytestmark = pytest.mark.fast


def categorize(src: str):
    return sort_categorized(categorize_declarations(parse_source(src).decls))


class TestIsExported:
    @pytest.mark.parametrize("name, expected", [
        ("Foo", True),
        ("foo", False),
        ("_Foo", False),
        ("Élan", True),
        ("", False),
    ])
    def test_case_rule(self, name, expected):
        assert is_exported(name) is expected


class TestClassification:
    def test_main_and_init(self):
        cat = categorize('''package main

func init() { a() }

func main() {}

func init() { b() }
''')
        assert cat.main is not None
        assert [fn.text for fn in cat.init] == ["func init() { a() }", "func init() { b() }"]

    def test_value_specs_split_by_first_name(self):
        cat = categorize('''package x

const (
	Exported = 1
	hidden = 2
)

var a, B = 1, 2
''')
        assert [s.name for s in cat.exported_consts] == ["Exported"]
        assert [s.name for s in cat.unexported_consts] == ["hidden"]
        assert [s.name for s in cat.unexported_vars] == ["a"]

    def test_block_doc_moves_to_first_spec(self):
        cat = categorize('''package x

// Limits for the parser.
const (
	MaxDepth = 10
	MaxWidth = 20
)
''')
        first = cat.exported_consts[0]
        assert first.name == "MaxDepth"
        assert first.doc == ["// Limits for the parser."]

    def test_merged_header_is_not_kept_as_doc(self):
        cat = categorize('''package x

// Exported constants.
const (
	A = 1
)
''')
        assert cat.exported_consts[0].doc == []

    def test_typed_iota_block_is_enum(self):
        cat = categorize('''package x

type Color int

const (
	Red Color = iota
	Green
)

func (c Color) String() string { return "" }
''')
        assert [g.type_name for g in cat.exported_enums] == ["Color"]
        group = cat.exported_enums[0]
        assert group.type_decl is not None
        assert [m.name for m in group.exported_methods] == ["String"]
        assert cat.exported_types == []
        assert cat.exported_consts == []

    def test_untyped_iota_block_is_plain_constants(self):
        cat = categorize('''package x

const (
	a = iota
	b
	c
)
''')
        assert cat.unexported_enums == []
        assert [s.name for s in cat.unexported_consts] == ["a", "b", "c"]

    def test_typed_block_without_iota_is_plain_constants(self):
        cat = categorize('''package x

const (
	Small Size = 1
	Large Size = 2
)
''')
        assert cat.exported_enums == []
        assert len(cat.exported_consts) == 2

    def test_enum_takes_first_annotated_spec_type(self):
        cat = categorize('''package x

const (
	_ = iota
	Low Level = iota
	High
)
''')
        assert [g.type_name for g in cat.exported_enums] == ["Level"]

    def test_enum_without_local_type_definition(self):
        cat = categorize('''package x

const (
	A other = iota
)
''')
        assert cat.unexported_enums[0].type_decl is None

    def test_second_block_of_same_enum_type(self):
        cat = categorize('''package x

type Op int

const (
	Add Op = iota
)

const (
	Mul Op = iota + 10
)

func (o Op) Apply() {}
''')
        first, second = cat.exported_enums
        assert first.type_decl is not None
        assert [m.name for m in first.exported_methods] == ["Apply"]
        assert second.type_decl is None
        assert second.exported_methods == []
        assert cat.exported_types == []


class TestTypeGroups:
    def test_constructor_and_methods(self):
        cat = categorize('''package x

func (s *Server) Start() {}

type Server struct{}

func NewServer() *Server { return nil }

func (s *Server) stop() {}
''')
        assert len(cat.exported_types) == 1
        group = cat.exported_types[0]
        assert [c.name for c in group.constructors] == ["NewServer"]
        assert [m.name for m in group.exported_methods] == ["Start"]
        assert [m.name for m in group.unexported_methods] == ["stop"]
        assert cat.exported_funcs == []

    def test_constructor_precision(self):
        cat = categorize('''package x

type Config struct{}

type Other struct{}

func NewConfig() (*Config, error) { return nil, nil }

func MustConfig() Config { return Config{} }

func NewThing() *Other { return nil }

func NewConfigs() []Config { return nil }

func NewUnknown() *Missing { return nil }

func Newer() int { return 0 }
''')
        groups = {g.type_name: g for g in cat.exported_types}
        assert [c.name for c in groups["Config"].constructors] == ["MustConfig", "NewConfig"]
        assert [c.name for c in groups["Other"].constructors] == ["NewThing"]
        assert [f.name for f in cat.exported_funcs] == ["NewConfigs", "NewUnknown", "Newer"]

    def test_constructor_declared_before_type(self):
        cat = categorize('''package x

func NewLate() *Late { return nil }

type Late struct{}
''')
        assert [c.name for c in cat.exported_types[0].constructors] == ["NewLate"]

    def test_generic_receiver(self, read_go):
        cat = categorize(read_go("generics"))
        group = next(g for g in cat.exported_types if g.type_name == "List")
        assert [m.name for m in group.exported_methods] == ["Push"]
        # Instantiated generic results are not matched as constructors
        assert [f.name for f in cat.exported_funcs] == ["NewIDs", "NewList"]

    def test_methods_for_type_defined_elsewhere(self, read_go):
        cat = categorize(read_go("remote_methods"))
        assert len(cat.exported_types) == 1
        group = cat.exported_types[0]
        assert group.type_name == "Circle"
        assert group.type_decl is None
        assert [c.name for c in group.constructors] == ["NewCircle"]
        assert [m.name for m in group.exported_methods] == ["Radius"]
        assert [m.name for m in group.unexported_methods] == ["grow"]

    def test_grouped_type_block_is_split(self):
        cat = categorize('''package x

// Shapes.
type (
	// Square has sides.
	Square struct{}
	circle struct{}
)
''')
        square = cat.exported_types[0].type_decl
        circle = cat.unexported_types[0].type_decl
        assert square.text == "type Square struct{}"
        assert square.doc == ["// Shapes.", "// Square has sides."]
        assert circle.text == "type circle struct{}"

    def test_enum_constructor_stays_standalone(self):
        cat = categorize('''package x

type Mode int

const (
	Fast Mode = iota
)

func NewMode() Mode { return Fast }
''')
        assert [f.name for f in cat.exported_funcs] == ["NewMode"]
        assert cat.exported_types == []


class TestUncategorized:
    def test_empty_blocks_and_statements(self):
        cat = categorize('''package x

const ()

x := 1
''')
        assert len(cat.uncategorized) == 2
        assert cat.input_count == 2


class TestSorting:
    def test_case_sensitive_order(self):
        cat = categorize('''package x

func beta() {}

func Zeta() {}

func Alpha() {}

func alpha() {}
''')
        assert [f.name for f in cat.exported_funcs] == ["Alpha", "Zeta"]
        assert [f.name for f in cat.unexported_funcs] == ["alpha", "beta"]

    def test_sorting_is_idempotent(self, read_go):
        cat = categorize(read_go("kitchen_sink"))
        before = [s.name for s in cat.unexported_consts]
        sort_categorized(cat)
        assert [s.name for s in cat.unexported_consts] == before


class TestInputCount:
    def test_counts_each_spec(self, read_go):
        cat = categorize(read_go("kitchen_sink"))
        assert cat.input_count == 22


class TestIdentifySection:
    @pytest.mark.parametrize("src, expected", [
        ('import "fmt"', Section.IMPORTS),
        ("func main() {}", Section.MAIN),
        ("func init() {}", Section.INIT),
        ("const A = 1", Section.EXPORTED_CONSTS),
        ("const (\n\tA T = iota\n)", Section.EXPORTED_ENUMS),
        ("const (\n\ta t = iota\n)", Section.UNEXPORTED_ENUMS),
        ("var a = 1", Section.UNEXPORTED_VARS),
        ("type T struct{}", Section.EXPORTED_TYPES),
        ("func (t *thing) Do() {}", Section.UNEXPORTED_TYPES),
        ("func Run() {}", Section.EXPORTED_FUNCS),
        ("const ()", None),
    ])
    def test_sections(self, src, expected):
        decl = parse_source(f"package x\n\n{src}\n").decls[0]
        assert identify_section(decl) == expected
