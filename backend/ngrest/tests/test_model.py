"""Tests for building a config from model hooks."""

import pytest

from conftest import ChangePasswordWindow, UserHistorySummaryWindow
from ngrest.config import Config
from ngrest.domain.exceptions import FieldNotFoundError, InvalidArgumentError
from ngrest.model import NgRestModel, attribute_label, build_config, parse_attribute_type
from ngrest.schemas import RegistrationDescriptor

TITLES = {1: "Mr.", 2: "Mrs."}


class User(NgRestModel):
    """Admin user model, as far as the admin panel needs it."""

    @classmethod
    def ngrest_api_endpoint(cls):
        return "api-admin-user"

    @classmethod
    def ngrest_list_order(cls):
        return {"firstname": "asc"}

    @classmethod
    def ngrest_attribute_types(cls):
        return {
            "title": ("selectArray", {"data": TITLES, "initValue": 0}),
            "firstname": "text",
            "lastname": "text",
            "email": "text",
            "password": "password",
        }

    @classmethod
    def ngrest_extra_attribute_types(cls):
        return {"lastlogin_timestamp": "datetime"}

    @classmethod
    def ngrest_filters(cls):
        return {"Removed": {"is_deleted": True}}

    @classmethod
    def ngrest_scopes(cls):
        return [
            ("list", ["firstname", "lastname", "email", "lastlogin_timestamp"]),
            ("create", ["title", "firstname", "lastname", "email", "password"]),
            ("update", ["title", "firstname", "lastname", "email"]),
            ("delete", True),
        ]

    @classmethod
    def ngrest_active_windows(cls):
        return [
            {"class": UserHistorySummaryWindow, "label": False, "limit": 5},
            {"class": ChangePasswordWindow, "label": "Password", "on": {"password": "pw"}},
        ]

    @classmethod
    def attribute_labels(cls):
        return {"firstname": "Vorname", "lastname": "Nachname", "email": "E-Mail"}

    @classmethod
    def generic_search_fields(cls):
        return ["firstname", "lastname", "email"]


class TestBuildConfig:
    """Tests for build_config()."""

    def test_sections(self):
        config = build_config(User)
        assert list(config.get()) == ["list", "create", "update", "delete", "aw"]

    def test_list_starts_with_primary_key(self):
        config = build_config(User)
        assert list(config.get()["list"]) == [
            "id",
            "firstname",
            "lastname",
            "email",
            "lastlogin_timestamp",
        ]

    def test_labels(self):
        """Test labels come from attribute_labels() or the attribute name."""
        create = build_config(User).get()["create"]
        assert create["firstname"].alias == "Vorname"
        assert create["password"].alias == "Password"

    def test_plugins_from_types(self):
        config = build_config(User)
        title = config.get()["create"]["title"].plugins
        assert [p.model_dump() for p in title] == [
            {"class_identifier": "SelectArray", "args": {"data": TITLES, "initValue": 0}}
        ]
        assert config.get()["list"]["lastlogin_timestamp"].plugins[0].class_identifier == "Datetime"

    def test_enabled_section_without_fields(self):
        assert build_config(User).get()["delete"] == {}

    def test_options(self):
        config = build_config(User)
        assert config.get_option("list_order") == {"firstname": "asc"}
        assert config.get_option("search_fields") == ["firstname", "lastname", "email"]
        assert config.get_option("filters") == {"Removed": {"is_deleted": True}}

    def test_active_windows(self):
        """Test active windows are instantiated and registered in order."""
        windows = list(build_config(User).get()["aw"].values())

        assert all(isinstance(w, RegistrationDescriptor) for w in windows)
        assert isinstance(windows[0].strap, UserHistorySummaryWindow)
        assert windows[0].strap.limit == 5
        assert windows[0].alias is None
        assert windows[1].alias == "Password"
        assert windows[1].bindings == {"password": "pw"}

    def test_same_hash_as_manual_config(self):
        assert build_config(User).get_config_hash() == Config("api-admin-user", "id").get_config_hash()

    def test_custom_primary_key(self):
        class Group(NgRestModel):
            primary_key = "group_id"

            @classmethod
            def ngrest_api_endpoint(cls):
                return "api-admin-group"

        config = build_config(Group)
        assert list(config.get()) == ["list"]
        assert list(config.get()["list"]) == ["group_id"]

    def test_unknown_attribute_in_scope(self):
        class Broken(User):
            @classmethod
            def ngrest_scopes(cls):
                return [("list", ["nickname"])]

        with pytest.raises(FieldNotFoundError, match="nickname"):
            build_config(Broken)

    def test_window_without_class(self):
        class Broken(User):
            @classmethod
            def ngrest_active_windows(cls):
                return [{"label": "Oops"}]

        with pytest.raises(InvalidArgumentError, match="no 'class'"):
            build_config(Broken)

    def test_endpoint_required(self):
        class Anonymous(NgRestModel):
            pass

        with pytest.raises(NotImplementedError):
            build_config(Anonymous)

    def test_custom_config_class(self):
        class AuditedConfig(Config):
            pass

        assert isinstance(build_config(User, config_cls=AuditedConfig), AuditedConfig)


class TestAttributeTypes:
    """Tests for attribute type parsing."""

    def test_keyword_only(self):
        assert parse_attribute_type("email", "text") == ("text", {})

    def test_keyword_with_options(self):
        assert parse_attribute_type("title", ["selectArray", {"data": TITLES}]) == (
            "selectArray",
            {"data": TITLES},
        )

    def test_keyword_tuple_without_options(self):
        assert parse_attribute_type("email", ("text",)) == ("text", {})

    @pytest.mark.parametrize("value", [42, (), ("text", "extra"), ("text", {}, {})])
    def test_invalid(self, value):
        with pytest.raises(InvalidArgumentError):
            parse_attribute_type("email", value)

    def test_label_fallback(self):
        assert attribute_label(User, "api_last_activity") == "Api Last Activity"
