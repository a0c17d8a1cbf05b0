"""Tests for ContainerConfig loading and FactoryContainer.from_config."""

import logging

import pytest

from factorycontainer import ContainerConfig, FactoryContainer, ServiceModule, type_path


class GreetingModule(ServiceModule):
    def provide(self, container):
        container.set("greeting", lambda c: "hello")


class NotAModule:
    pass


class TestContainerConfig:
    """Tests for configuration construction."""

    def test_defaults(self):
        config = ContainerConfig()

        assert config.modules == []
        assert config.lock is True
        assert config.debug is False

    def test_from_dict(self):
        config = ContainerConfig.from_dict({
            "modules": [type_path(GreetingModule)],
            "lock": False,
            "debug": True,
        })

        assert config.modules == [type_path(GreetingModule)]
        assert config.lock is False
        assert config.debug is True

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown configuration keys"):
            ContainerConfig.from_dict({"module": []})

    @pytest.mark.parametrize("key", ["lock", "debug"])
    def test_from_dict_rejects_string_flags(self, key):
        """Test that "false" as a string is rejected rather than read as true."""
        with pytest.raises(ValueError, match=f"{key} must be true or false"):
            ContainerConfig.from_dict({key: "false"})

    def test_from_file_reads_yaml_booleans(self, tmp_path):
        path = tmp_path / "container.yaml"
        path.write_text("lock: no\ndebug: yes\n")

        config = ContainerConfig.from_file(path)

        assert config.lock is False
        assert config.debug is True

    def test_modules_string_rejected(self):
        with pytest.raises(ValueError, match="must be a list"):
            ContainerConfig(modules="a.b.C")

    def test_blank_modules_dropped(self):
        config = ContainerConfig(modules=["  a.b.C ", "", "  "])

        assert config.modules == ["a.b.C"]


class TestConfigLoading:
    """Tests for YAML and environment loading."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "container.yaml"
        path.write_text(
            "modules:\n"
            f"  - {type_path(GreetingModule)}\n"
            "lock: false\n"
        )

        config = ContainerConfig.from_file(path)

        assert config.modules == [type_path(GreetingModule)]
        assert config.lock is False

    def test_missing_file_gives_defaults(self, tmp_path):
        config = ContainerConfig.from_file(tmp_path / "missing.yaml")

        assert config == ContainerConfig()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ContainerConfig.from_file(path) == ContainerConfig()

    def test_non_mapping_file_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            ContainerConfig.from_file(path)

    def test_from_env(self, monkeypatch, tmp_path):
        """Test that environment variables override the file."""
        path = tmp_path / "container.yaml"
        path.write_text("modules:\n  - from.file.Module\ndebug: false\n")
        monkeypatch.setenv("FACTORY_CONTAINER_CONFIG", str(path))
        monkeypatch.setenv("FACTORY_CONTAINER_MODULES", "a.One, b.Two")
        monkeypatch.setenv("FACTORY_CONTAINER_DEBUG", "yes")

        config = ContainerConfig.from_env()

        assert config.modules == ["a.One", "b.Two"]
        assert config.debug is True

    def test_from_env_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("APP_MODULES", "a.One")

        config = ContainerConfig.from_env(prefix="APP")

        assert config.modules == ["a.One"]
        assert config.debug is False


class TestValidation:
    """Tests for module path validation."""

    def test_valid(self):
        config = ContainerConfig(modules=[type_path(GreetingModule)])

        assert config.validate() == []

    def test_unimportable_module(self):
        errors = ContainerConfig(modules=["missing_pkg.Module"]).validate()

        assert len(errors) == 1
        assert "cannot be imported" in errors[0]

    def test_not_a_service_module(self):
        errors = ContainerConfig(modules=[type_path(NotAModule)]).validate()

        assert errors == [f"module {type_path(NotAModule)!r} is not a ServiceModule subclass"]


class TestFromConfig:
    """Tests for building containers from configuration."""

    def test_registers_and_locks(self):
        config = ContainerConfig(modules=[type_path(GreetingModule)])

        container = FactoryContainer.from_config(config)

        assert container.locked
        assert container.get("greeting") == "hello"

    def test_without_lock(self):
        """Test that lock=False leaves modules pending."""
        config = ContainerConfig(modules=[type_path(GreetingModule)], lock=False)

        container = FactoryContainer.from_config(config)

        assert not container.locked
        assert not container.has("greeting")

        container.lock_module()

        assert container.get("greeting") == "hello"

    def test_invalid_module_raises(self):
        config = ContainerConfig(modules=["missing_pkg.Module"])

        with pytest.raises(ValueError, match="cannot be imported"):
            FactoryContainer.from_config(config)

    def test_debug_sets_package_log_level(self):
        package_logger = logging.getLogger("factorycontainer")
        previous = package_logger.level
        try:
            FactoryContainer.from_config(ContainerConfig(debug=True))

            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)
