"""Tests for atom parsing and the electronegativity configuration."""

import pytest

from dipolar.core import (
    Atom,
    AtomType,
    ConfigurationError,
    DEFAULT_ELECTRONEGATIVITY,
    ElectronegativityTable,
    UnknownElement,
)
from dipolar.infrastructure.config import load_electronegativity_table


class TestParseAtom:
    """Tests for splitting tokens into element symbol and label."""

    def test_symbol_and_label(self, table):
        atom = table.parse_atom("H1")
        assert atom == Atom(AtomType("H"), "1")
        assert str(atom) == "H1"

    def test_bare_symbol(self, table):
        assert table.parse_atom("O") == Atom(AtomType("O"), "")

    def test_label_may_contain_letters(self, table):
        assert table.parse_atom("Ca").label == "a"

    def test_unknown_symbol(self, table):
        with pytest.raises(UnknownElement) as info:
            table.parse_atom("X1")
        assert info.value.symbol == "X"

    def test_empty_token(self, table):
        with pytest.raises(UnknownElement):
            table.parse_atom("")

    def test_longest_symbol_wins(self):
        table = ElectronegativityTable({"C": 2.55, "Cl": 3.16})
        assert table.parse_atom("Cl2") == Atom(AtomType("Cl"), "2")
        assert table.parse_atom("C2") == Atom(AtomType("C"), "2")

    def test_equality_is_over_symbol_and_label(self, table):
        assert table.parse_atom("H1") != table.parse_atom("H2")
        assert hash(table.parse_atom("H1")) == hash(Atom(AtomType("H"), "1"))


class TestElectronegativityTable:
    def test_default_values(self, table):
        assert table.symbols == ("H", "C", "N", "O", "P", "S")
        assert table.electronegativity("O") == 3.44
        assert table.electronegativity(AtomType("H")) == 2.2

    def test_table_is_read_only(self, table):
        with pytest.raises(TypeError):
            table.values["H"] = 1.0

    def test_unknown_lookup(self, table):
        with pytest.raises(UnknownElement):
            table.electronegativity("F")
        assert "F" not in table

    def test_make_atom(self, table):
        assert table.make_atom("O", "2") == table.parse_atom("O2")
        with pytest.raises(UnknownElement):
            table.make_atom("Xe", "0")


class TestLoader:
    """Tests for loading config/electroneg.toml."""

    def test_missing_file_is_created_with_defaults(self, tmp_path):
        path = tmp_path / "config" / "electroneg.toml"
        table = load_electronegativity_table(path)

        assert path.exists()
        assert dict(table.values) == DEFAULT_ELECTRONEGATIVITY
        assert path.read_text(encoding="utf-8").startswith("#")

    def test_reads_existing_file_in_order(self, tmp_path):
        path = tmp_path / "electroneg.toml"
        path.write_text("# custom\nO = 3.44\nH = 2.2 # hydrogen\nF = 3.98\n")

        table = load_electronegativity_table(path)

        assert table.symbols == ("O", "H", "F")
        assert table.electronegativity("F") == 3.98

    def test_integer_values_are_accepted(self, tmp_path):
        path = tmp_path / "electroneg.toml"
        path.write_text("X = 3\n")
        assert load_electronegativity_table(path).electronegativity("X") == 3.0

    @pytest.mark.parametrize(
        "content",
        [
            "H = 'high'\n",
            "H = 2,2,5\n",
            "H 2.2\n",
            "[section]\nH = 2.2\n",
            "",
            "H = true\n",
        ],
    )
    def test_malformed_file(self, tmp_path, content):
        path = tmp_path / "electroneg.toml"
        path.write_text(content)
        with pytest.raises(ConfigurationError):
            load_electronegativity_table(path)

    def test_decimal_comma_file(self, tmp_path):
        path = tmp_path / "electroneg.toml"
        path.write_text(
            "#This text is generated automatically\n#Electronegativity of atoms\n"
            "H = 2,2\nC = 2,55\nN = 3,04\nO = 3,44\nP = 2,19\nS = 2,58",
            encoding="utf-8",
        )
        table = load_electronegativity_table(path)
        assert table == ElectronegativityTable(DEFAULT_ELECTRONEGATIVITY)
        assert table.symbols == ("H", "C", "N", "O", "P", "S")
