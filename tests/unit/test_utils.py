"""Tests for ec2ssh utility functions."""

from ec2ssh.utils import (
    format_instance_list,
    format_numbered_instance_list,
    format_table,
    log_and_print_error,
)


class TestFormatTable:
    """Tests for format_table."""

    def test_columns_are_padded_to_widest_cell(self) -> None:
        table = format_table(["a", "bb"], [["long-value", "x"], ["s", "y"]])

        assert table == (
            "a             bb\n"
            "-             --\n"
            "long-value    x\n"
            "s             y\n"
        )

    def test_header_only(self) -> None:
        assert format_table(["Name", "ID"], []) == "Name    ID\n----    --\n"


class TestInstanceTables:
    """Tests for the instance table helpers."""

    def test_instance_list(self, record) -> None:
        table = format_instance_list([record("i-00000001", "web-1"), record("i-00000002")])
        lines = table.splitlines()

        assert lines[0].split() == ["Name", "Instance", "ID", "Private", "IP", "Public", "IP"]
        assert lines[2].split() == ["web-1", "i-00000001", "10.0.0.1", "54.0.0.1"]
        assert lines[3].split() == ["[None]", "i-00000002", "10.0.0.1", "54.0.0.1"]

    def test_numbered_list_starts_at_one(self, record) -> None:
        table = format_numbered_instance_list([record("i-00000001", "a"), record("i-00000002", "b")])
        lines = table.splitlines()

        assert lines[0].startswith("n ")
        assert lines[2].split()[0] == "1"
        assert lines[3].split()[0] == "2"


def test_log_and_print_error(capsys) -> None:
    log_and_print_error("Found no instance '%s'", "web")

    assert capsys.readouterr().err == "Error: Found no instance 'web'\n"
