"""
Tests del ciclo de vida del recurso tracker_project.

Verifica:
1. create guarda la identidad devuelta y no deja registro parcial si falla
2. read sobrescribe los atributos sincronizados (excepto status y join_as)
3. update reenvía todos los atributos escribibles
4. delete limpia el registro solo si tiene éxito
5. exists usa la positividad del ID y no oculta errores
6. identidades mal formadas fallan sin llamar al remoto
"""

import pytest

from trackerprovider.core.errors import InvalidIdentifierError, RemoteCallError, SchemaTypeError
from trackerprovider.core.runtime.state import ResourceRecord
from trackerprovider.core.schema import writable_fields
from trackerprovider.providers.project import build_payload
from trackerprovider.core.project.models import ProjectConfig


class TestCreate:

    def test_demo_scenario_create_then_read(self, resource, client):
        record = ResourceRecord(attributes={"name": "Demo", "iteration_length": 2})

        identity = resource.create(record)

        assert identity == "42"
        assert record.id == "42"
        values = resource.read(record)
        assert values["point_scale"] == "0,1,2,3"
        assert record.get_str("point_scale") == "0,1,2,3"
        assert record.get_str("name") == "Demo"
        assert record.get_int("iteration_length") == 2
        assert record.id == "42"

    def test_create_sends_full_payload_with_zero_values(self, resource, client):
        record = ResourceRecord(attributes={"name": "Demo"})

        resource.create(record)

        op, payload = client.calls[0]
        assert op == "create"
        assert set(payload) == set(writable_fields())
        assert payload["name"] == "Demo"
        assert payload["iteration_length"] == 0
        assert payload["public"] is False
        assert payload["description"] == ""

    def test_create_failure_leaves_record_absent(self, resource, client):
        client.fail = "create"
        record = ResourceRecord(attributes={"name": "Demo"})

        with pytest.raises(RemoteCallError) as exc:
            resource.create(record)

        assert exc.value.phase == "create"
        assert "creating new project failed" in str(exc.value)
        assert record.id == ""
        assert record.attributes == {"name": "Demo"}

    def test_create_rejects_mistyped_attribute(self, resource, client):
        record = ResourceRecord(attributes={"name": "Demo", "iteration_length": "2"})

        with pytest.raises(SchemaTypeError):
            resource.create(record)
        assert client.calls == []


class TestRead:

    def test_read_excludes_status_and_join_as(self, resource, client):
        record = ResourceRecord(attributes={"name": "Demo", "status": "active", "join_as": "member"})
        resource.create(record)
        client.projects[42]["status"] = "archived"
        client.projects[42]["join_as"] = "viewer"
        client.projects[42]["description"] = "changed remotely"

        values = resource.read(record)

        assert "status" not in values
        assert "join_as" not in values
        assert record.get_str("status") == "active"
        assert record.get_str("join_as") == "member"
        assert record.get_str("description") == "changed remotely"

    def test_read_is_idempotent(self, resource, client):
        record = ResourceRecord(attributes={"name": "Demo"})
        resource.create(record)

        resource.read(record)
        first = dict(record.attributes), record.id
        resource.read(record)

        assert (dict(record.attributes), record.id) == first

    def test_read_error_keeps_record(self, resource, client):
        record = ResourceRecord(attributes={"name": "Demo"})
        resource.create(record)
        before = dict(record.attributes)
        client.fail = "fetch"

        with pytest.raises(RemoteCallError) as exc:
            resource.read(record)

        assert "get project api call failed" in str(exc.value)
        assert record.id == "42"
        assert record.attributes == before

    def test_read_fills_null_remote_values_with_zero(self, resource, client):
        record = ResourceRecord(id="42")
        client.projects[42] = {"id": 42, "name": "Demo", "description": None}

        resource.read(record)

        assert record.get_str("description") == ""
        assert record.get_int("account_id") == 0


class TestUpdate:

    def test_update_sends_every_writable_attribute(self, resource, client):
        record = ResourceRecord(attributes={
            "name": "Demo",
            "iteration_length": 2,
            "description": "desc",
            "public": True,
        })
        resource.create(record)
        resource.read(record)
        record.attributes["name"] = "Demo 2"

        identity = resource.update(record)

        assert identity == "42"
        op, (project_id, payload) = client.calls[-1]
        assert op == "update"
        assert project_id == 42
        assert set(payload) == set(writable_fields())
        assert payload["name"] == "Demo 2"
        assert payload["iteration_length"] == 2
        assert payload["description"] == "desc"
        assert payload["public"] is True
        assert payload["point_scale"] == "0,1,2,3"

    def test_update_failure_leaves_record(self, resource, client):
        record = ResourceRecord(attributes={"name": "Demo"})
        resource.create(record)
        client.fail = "update"

        with pytest.raises(RemoteCallError) as exc:
            resource.update(record)

        assert exc.value.phase == "update"
        assert "update project failed" in str(exc.value)
        assert record.id == "42"


class TestDelete:

    def test_delete_success_clears_record(self, resource, client):
        record = ResourceRecord(attributes={"name": "Demo"})
        resource.create(record)

        resource.delete(record)

        assert record.id == ""
        assert record.attributes == {}
        assert 42 not in client.projects

    def test_delete_failure_keeps_record(self, resource, client):
        record = ResourceRecord(attributes={"name": "Demo"})
        resource.create(record)
        client.fail = "delete"

        with pytest.raises(RemoteCallError) as exc:
            resource.delete(record)

        assert "delete project failed" in str(exc.value)
        assert record.id == "42"
        assert record.attributes == {"name": "Demo"}


class TestExists:

    @pytest.mark.parametrize("remote_id, expected", [(0, False), (-1, False), (1, True), (7, True)])
    def test_exists_follows_id_positivity(self, resource, client, remote_id, expected):
        client.override_id = remote_id

        assert resource.exists(ResourceRecord(id="7")) is expected

    def test_exists_surfaces_call_errors(self, resource, client):
        client.fail = "fetch"

        with pytest.raises(RemoteCallError):
            resource.exists(ResourceRecord(id="7"))


class TestIdentity:

    @pytest.mark.parametrize("operation", ["read", "update", "delete", "exists"])
    @pytest.mark.parametrize("identity", ["abc", "", "1.5", " 7", "1_000", "42\n", "٤٢"])
    def test_malformed_identity_never_calls_remote(self, resource, client, operation, identity):
        record = ResourceRecord(id=identity, attributes={"name": "Demo"})

        with pytest.raises(InvalidIdentifierError) as exc:
            getattr(resource, operation)(record)

        assert "conversion of id failed" in str(exc.value)
        assert exc.value.retryable is False
        assert client.calls == []
        assert record.id == identity

    def test_import_is_passthrough(self, resource, client):
        assert resource.import_state("abc") == "abc"
        assert resource.import_state("123") == "123"
        assert client.calls == []


def test_build_payload_uses_declared_values():
    config = ProjectConfig(name="Demo", week_start_day="Monday", account_id=9)

    payload = build_payload(config)

    assert payload["account_id"] == 9
    assert "week_start_day" not in payload
    assert payload["enable_tasks"] is False
