"""Tests for the JSON to TypeScript conversion pipeline."""

import pytest

from json2ts import ConversionConfig, ConversionError, convert, convert_file, emit, infer
from json2ts.core.engine import build_table, parse_json
from json2ts.core.exceptions import InputFileNotFoundError
from json2ts.models.record import GeneratedRecord, Property
from json2ts.models.types import TypeDescriptor, TypeKind


class TestEmit:
    """Tests for rendering a record table."""

    def test_interface_block(self, default_config):
        """Test interface output with an optional property."""
        table = {
            "Root": GeneratedRecord(name="Root", properties=[
                Property(name="id", type=TypeDescriptor.primitive(TypeKind.NUMBER)),
                Property(name="note", type=TypeDescriptor.unknown(), is_optional=True),
            ])
        }

        assert emit(table, default_config) == (
            "interface Root {\n"
            "  id: number;\n"
            "  note?: any;\n"
            "}"
        )

    def test_class_block(self):
        """Test class output includes a constructor copying every field."""
        table = {
            "Root": GeneratedRecord(name="Root", properties=[
                Property(name="name", type=TypeDescriptor.primitive(TypeKind.STRING)),
                Property(name="age", type=TypeDescriptor.primitive(TypeKind.NUMBER)),
            ])
        }

        assert emit(table, ConversionConfig(as_class=True)) == (
            "class Root {\n"
            "  name: string;\n"
            "  age: number;\n"
            "\n"
            "  constructor(data: any) {\n"
            "    this.name = data.name;\n"
            "    this.age = data.age;\n"
            "  }\n"
            "}"
        )

    def test_records_separated_by_blank_line(self, default_config):
        """Test records are emitted in table order with blank lines between."""
        table = {
            "B": GeneratedRecord(name="B"),
            "A": GeneratedRecord(name="A"),
        }

        assert emit(table, default_config) == "interface B {\n}\n\ninterface A {\n}"

    def test_empty_table(self, default_config):
        """Test an empty table renders as an empty string."""
        assert emit({}, default_config) == ""


class TestConvert:
    """Tests for convert."""

    def test_simple_object(self, default_config):
        """Test primitive fields and an optional null field."""
        json_text = '{"name": "John", "age": 25, "isActive": true, "nullField": null}'

        result = convert(json_text, default_config)

        assert result == (
            "interface Root {\n"
            "  name: string;\n"
            "  age: number;\n"
            "  isActive: boolean;\n"
            "  nullField?: any;\n"
            "}"
        )

    def test_default_config(self):
        """Test conversion without explicit options."""
        assert convert('{"a": 1}') == "interface Root {\n  a: number;\n}"

    def test_nested_objects(self, default_config):
        """Test nested objects produce one interface each, innermost first."""
        json_text = '{"user": {"name": "John", "address": {"city": "New York", "zip": "10001"}}}'

        result = convert(json_text, default_config)

        assert "interface Root {\n  user: User;\n}" in result
        assert "interface User {\n  name: string;\n  address: Address;\n}" in result
        assert "interface Address {\n  city: string;\n  zip: string;\n}" in result
        assert result.index("interface Address") < result.index("interface User") < result.index("interface Root")

    def test_array_of_objects(self, default_config):
        """Test arrays of objects merge into a single singular interface."""
        json_text = '{"users": [{"name": "John", "age": 25}, {"name": "Jane", "age": 24}]}'

        result = convert(json_text, default_config)

        assert "users: User[];" in result
        assert result.count("interface User {") == 1
        assert "interface User {\n  name: string;\n  age: number;\n}" in result

    def test_arrays(self, default_config):
        """Test primitive, empty, mixed and nested arrays."""
        json_text = '{"tags": ["a", "b"], "empty": [], "mixed": [1, "a"], "matrix": [[1, 2], [3]]}'

        result = convert(json_text, default_config)

        assert "tags: string[];" in result
        assert "empty: any[];" in result
        assert "mixed: any[];" in result
        assert "matrix: number[][];" in result

    def test_generate_classes(self):
        """Test class output for nested records."""
        result = convert('{"name": "John", "pet": {"kind": "cat"}}', ConversionConfig(as_class=True))

        assert "class Pet {" in result
        assert "class Root {" in result
        assert "pet: Pet;" in result
        assert "constructor(data: any) {" in result
        assert "this.name = data.name;" in result
        assert "this.pet = data.pet;" in result
        assert "this.kind = data.kind;" in result
        assert "interface" not in result

    def test_prefix(self):
        """Test prefix is applied to every name exactly once."""
        json_text = '{"user": {"name": "John", "roles": [{"id": 1}]}}'

        result = convert(json_text, ConversionConfig(prefix="I"))

        assert "interface IRoot {" in result
        assert "user: IUser;" in result
        assert "interface IUser {" in result
        assert "roles: IRole[];" in result
        assert "interface IRole {" in result
        assert "IIUser" not in result
        assert "IIRole" not in result

    def test_union_null(self, union_null_config):
        """Test null fields in union-null mode."""
        result = convert('{"name": "John", "nickname": null}', union_null_config)

        assert "name: string;" in result
        assert "nickname: null;" in result
        assert "nickname?" not in result

    def test_empty_object(self, default_config):
        """Test an empty object yields an empty Root interface."""
        assert convert("{}", default_config) == "interface Root {\n}"

    @pytest.mark.parametrize("json_text", ["[1, 2]", "[]", "42", '"text"', "null", "true"])
    def test_non_object_root(self, default_config, json_text):
        """Test top-level values other than objects generate nothing."""
        assert convert(json_text, default_config) == ""

    def test_duplicate_keys_last_wins(self, default_config):
        """Test duplicate keys keep their first position and last value."""
        result = convert('{"a": 1, "b": true, "a": "x"}', default_config)
        assert result == "interface Root {\n  a: string;\n  b: boolean;\n}"

    @pytest.mark.parametrize("json_text", ['{"a":}', "", "{", "{'a': 1}", '{"a": 1,}'])
    def test_malformed_json(self, default_config, json_text):
        """Test malformed input raises ConversionError."""
        with pytest.raises(ConversionError) as exc_info:
            convert(json_text, default_config)

        assert "Failed to convert JSON" in str(exc_info.value)
        assert exc_info.value.original_error is not None

    @pytest.mark.parametrize("json_text", ['{"a": NaN}', '{"a": Infinity}', '{"a": -Infinity}'])
    def test_non_standard_constants_rejected(self, default_config, json_text):
        """Test JavaScript-only numeric constants are not accepted."""
        with pytest.raises(ConversionError):
            convert(json_text, default_config)

    def test_independent_calls(self, default_config):
        """Test each conversion starts from a fresh table."""
        convert('{"user": {"a": 1}}', default_config)
        result = convert('{"b": 2}', default_config)

        assert result == "interface Root {\n  b: number;\n}"

    def test_sample_document(self, default_config, sample_json):
        """Test a realistic document end to end."""
        result = convert(sample_json, default_config)

        assert result.startswith("interface BillingAddress {")
        assert result.endswith("}")
        assert "billing_address: BillingAddress;" in result
        assert "employees: Employee[];" in result
        assert "interface Employee {\n  name: string;\n  age: number;\n  manager: boolean;\n}" in result
        assert "logo?: any;" in result
        assert "tags: string[];" in result


class TestEngineHelpers:
    """Tests for parse_json, build_table and convert_file."""

    def test_parse_json(self):
        """Test valid JSON is parsed."""
        assert parse_json('{"a": [1, null]}') == {"a": [1, None]}

    def test_parse_json_non_string(self):
        """Test non-text input is reported as a conversion error."""
        with pytest.raises(ConversionError):
            parse_json(None)

    def test_build_table_matches_infer(self, default_config, sample_json):
        """Test build_table returns the same table as infer on parsed JSON."""
        assert build_table(sample_json, default_config) == infer(parse_json(sample_json), default_config)

    def test_convert_file(self, sample_json_file, default_config):
        """Test converting a JSON file."""
        result = convert_file(str(sample_json_file), default_config)
        assert "interface Root {" in result

    def test_convert_missing_file(self, temp_dir):
        """Test error when the input file doesn't exist."""
        missing = temp_dir / "missing.json"

        with pytest.raises(InputFileNotFoundError) as exc_info:
            convert_file(str(missing))

        assert "does not exist" in str(exc_info.value)
        assert exc_info.value.file_path == str(missing)
