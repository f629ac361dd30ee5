"""Tests for the instance record model and flattening."""

from ec2ssh.core.instance import InstanceRecord, flatten_reservations, sort_by_name


class TestInstanceRecord:
    """Tests for InstanceRecord."""

    def test_from_aws_maps_fields(self, aws_instance) -> None:
        instance = aws_instance(
            "i-0123456789abcdef0",
            name="web-1",
            private_ip="10.0.0.5",
            public_ip="54.1.2.3",
            key_name="prod-key",
        )

        record = InstanceRecord.from_aws(instance)

        assert record.id == "i-0123456789abcdef0"
        assert record.name == "web-1"
        assert record.private_address == "10.0.0.5"
        assert record.public_address == "54.1.2.3"
        assert record.credential_name == "prod-key"
        assert record.raw is instance

    def test_missing_optional_fields_are_none(self, aws_instance) -> None:
        record = InstanceRecord.from_aws(
            aws_instance("i-12abcdef", public_ip=None, key_name=None)
        )

        assert record.name is None
        assert record.public_address is None
        assert record.credential_name is None

    def test_display_placeholders(self, record) -> None:
        unnamed = record("i-12abcdef", public_ip=None)

        assert unnamed.display_name == "[None]"
        assert unnamed.display_public_address == "None"

    def test_display_name_is_escaped(self, record) -> None:
        assert record("i-12abcdef", "web server/1").display_name == "web+server%2F1"

    def test_name_tag_ignores_other_tags(self, aws_instance) -> None:
        instance = aws_instance("i-12abcdef")
        instance["Tags"] = [
            {"Key": "Env", "Value": "prod"},
            {"Key": "Name", "Value": "db-1"},
        ]

        assert InstanceRecord.from_aws(instance).name == "db-1"

    def test_raw_is_not_compared(self, aws_instance) -> None:
        first = InstanceRecord.from_aws(aws_instance("i-12abcdef", "a"))
        second = InstanceRecord.from_aws(aws_instance("i-12abcdef", "a"))
        second.raw["Extra"] = True

        assert first == second


class TestSortByName:
    """Tests for name ordering."""

    def test_sorts_ascending(self, record) -> None:
        records = [record("i-00000003", "web-3"), record("i-00000001", "web-1"), record("i-00000002", "web-2")]

        assert [r.name for r in sort_by_name(records)] == ["web-1", "web-2", "web-3"]

    def test_sort_is_stable_for_equal_names(self, record) -> None:
        records = [
            record("i-0000000b", "web"),
            record("i-0000000a", "app"),
            record("i-0000000c", "web"),
            record("i-00000001", "web"),
        ]

        ordered = sort_by_name(records)

        assert [r.id for r in ordered] == ["i-0000000a", "i-0000000b", "i-0000000c", "i-00000001"]

    def test_unnamed_instances_sort_by_placeholder(self, record) -> None:
        records = [record("i-00000001", "web"), record("i-00000002"), record("i-00000003", "Zed")]

        assert [r.display_name for r in sort_by_name(records)] == ["Zed", "[None]", "web"]


class TestFlattenReservations:
    """Tests for flatten_reservations."""

    def test_flattens_all_groups(self, aws_instance) -> None:
        reservations = [
            {"Instances": [aws_instance("i-00000002", "web-2")]},
            {"Instances": [aws_instance("i-00000001", "web-1"), aws_instance("i-00000003", "db")]},
        ]

        records = flatten_reservations(reservations)

        assert [r.name for r in records] == ["db", "web-1", "web-2"]

    def test_empty_response(self) -> None:
        assert flatten_reservations([]) == []
        assert flatten_reservations([{"Instances": []}]) == []

    def test_duplicate_ids_are_dropped(self, aws_instance) -> None:
        reservations = [
            {"Instances": [aws_instance("i-00000001", "web", public_ip="1.1.1.1")]},
            {"Instances": [aws_instance("i-00000001", "web", public_ip="2.2.2.2")]},
        ]

        records = flatten_reservations(reservations)

        assert len(records) == 1
        assert records[0].public_address == "1.1.1.1"
