"""Tests for exporting a built config."""

import json

from ngrest.config import Config
from ngrest.export import export_config, export_json


def _user_config(window):
    config = Config("api-admin-user", "id")
    config.list.field("firstname", "Vorname").dropdown(source="titles")
    config.create.field("email", "E-Mail").text().field("title", "Anrede").select_array(
        {1: "Mr."}, initValue=0
    )
    config.aw.register(window, "Summary").on("email", "emailMap")
    return config


class TestExport:
    """Tests for export_config() and export_json()."""

    def test_envelope(self, summary_window):
        config = _user_config(summary_window)
        exported = export_config(config)

        assert exported["rest_url"] == "admin/api-admin-user"
        assert exported["rest_primary_key"] == "id"
        assert exported["config_hash"] == config.get_config_hash()

    def test_order_preserved(self, summary_window):
        sections = export_config(_user_config(summary_window))["sections"]
        assert list(sections) == ["list", "create", "aw"]
        assert list(sections["list"]) == ["id", "firstname"]
        assert list(sections["create"]) == ["email", "title"]

    def test_field_dump(self, summary_window):
        sections = export_config(_user_config(summary_window))["sections"]
        assert sections["list"]["id"] == {"name": "id", "alias": "ID", "plugins": []}
        assert sections["list"]["firstname"]["plugins"] == [
            {"class_identifier": "Dropdown", "args": {"source": "titles"}}
        ]

    def test_strap_excluded(self, summary_window):
        """Test the registered object itself is not exported."""
        (registration,) = export_config(_user_config(summary_window))["sections"]["aw"].values()
        assert "strap" not in registration
        assert registration["bindings"] == {"email": "emailMap"}
        assert registration["alias"] == "Summary"

    def test_json_deterministic(self, summary_window):
        """Test equal trees serialize to equal documents."""
        first = export_json(_user_config(summary_window))
        second = export_json(_user_config(type(summary_window)()))
        assert first == second

    def test_json_keeps_insertion_order(self, summary_window):
        document = export_json(_user_config(summary_window), indent=2)
        assert document.index('"firstname"') < document.index('"create"')
        assert document.index('"email"') < document.index('"title"')

    def test_json_positional_args(self, summary_window):
        parsed = json.loads(export_json(_user_config(summary_window)))
        title = parsed["sections"]["create"]["title"]
        assert title["plugins"][0]["args"] == {"0": {"1": "Mr."}, "initValue": 0}

    def test_non_serializable_args(self, config):
        """Test arbitrary argument values do not break the export."""
        config.create.field("owner", "Owner").dropdown(source=object())
        parsed = json.loads(export_json(config))
        assert "object" in parsed["sections"]["create"]["owner"]["plugins"][0]["args"]["source"]
