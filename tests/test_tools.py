"""
Tests for the command-line tools in tools/
"""
import json

import pytest
from jsonschema import Draft202012Validator

import export_json_schemas
import validate_payload
from clubshared import SCHEMAS


class TestValidatePayload:

    def test_valid_payload(self, tmp_path, helpers, capsys):
        path = helpers.write_payload(tmp_path, {"content": "hello"})
        assert validate_payload.main(["create_post", str(path)]) == 0
        assert "OK: payload is valid for create_post" in capsys.readouterr().out

    def test_invalid_payload(self, tmp_path, helpers, capsys):
        path = helpers.write_payload(tmp_path, {"logoUrl": "not-a-url"})
        assert validate_payload.main(["update_sponsor", str(path)]) == 2
        out = capsys.readouterr().out
        assert "INVALID: 1 error(s)" in out
        assert "- logoUrl: Invalid logo URL" in out

    def test_list(self, capsys):
        assert validate_payload.main(["--list"]) == 0
        assert capsys.readouterr().out.split() == sorted(SCHEMAS)

    def test_unknown_schema(self, tmp_path, helpers):
        path = helpers.write_payload(tmp_path, {})
        with pytest.raises(SystemExit):
            validate_payload.main(["create_widget", str(path)])


class TestExportJsonSchemas:

    def test_every_schema_exported(self, tmp_path, capsys):
        assert export_json_schemas.main(["--out", str(tmp_path)]) == 0
        written = sorted(p.name for p in tmp_path.glob("*.schema.json"))
        assert written == sorted(f"{name}.schema.json" for name in SCHEMAS)

        for path in tmp_path.glob("*.schema.json"):
            Draft202012Validator.check_schema(json.loads(path.read_text(encoding="utf-8")))

    def test_exported_schema_uses_wire_names(self):
        schema = export_json_schemas.build_json_schemas()["register"]
        assert set(schema["required"]) == {"email", "password", "firstName", "lastName"}
        assert schema["properties"]["firstName"]["minLength"] == 2

    def test_payload_accepted_by_exported_schema(self, register_payload, sponsor_payload):
        schemas = export_json_schemas.build_json_schemas()
        Draft202012Validator(schemas["register"]).validate(register_payload)
        Draft202012Validator(schemas["create_sponsor"]).validate(sponsor_payload)

    def test_exported_schema_rejects_short_name(self, register_payload):
        schema = export_json_schemas.build_json_schemas()["register"]
        register_payload["firstName"] = "J"
        assert list(Draft202012Validator(schema).iter_errors(register_payload))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
