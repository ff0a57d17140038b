"""Tests for the devcontainer configuration model."""

import pytest
from pydantic import ValidationError

from zed_devcontainer.models.config import DevcontainerConfig
from zed_devcontainer.models.hooks import HookCommand, HookKind


class TestDevcontainerConfig:
    """Test suite for DevcontainerConfig."""

    def test_camel_case_keys(self):
        """Test that camelCase JSON keys map onto fields."""
        config = DevcontainerConfig.model_validate({
            "name": "demo",
            "image": "alpine:latest",
            "workspaceFolder": "/workspace",
            "workspaceMount": "type=bind,source=/src,target=/src",
            "runArgs": ["--privileged"],
            "forwardPorts": [3000, 8080],
            "remoteUser": "vscode",
        })

        assert config.name == "demo"
        assert config.image == "alpine:latest"
        assert config.workspace_folder == "/workspace"
        assert config.workspace_mount == "type=bind,source=/src,target=/src"
        assert config.run_args == ["--privileged"]
        assert config.forward_ports == [3000, 8080]
        assert config.remote_user == "vscode"

    def test_empty_object_defaults(self):
        """Test that every key is optional and lists default to empty."""
        config = DevcontainerConfig.model_validate({})

        assert config.name is None
        assert config.image is None
        assert config.dockerfile is None
        assert config.mounts == []
        assert config.run_args == []
        assert config.forward_ports == []
        assert config.post_create_hook is None

    def test_unknown_keys_ignored(self):
        """Test that keys outside the schema are dropped."""
        config = DevcontainerConfig.model_validate({
            "image": "alpine",
            "customizations": {"vscode": {"extensions": []}},
            "features": {},
        })

        assert config.image == "alpine"
        assert not hasattr(config, "customizations")

    def test_port_out_of_range_rejected(self):
        """Test that ports must fit in 16 bits."""
        with pytest.raises(ValidationError):
            DevcontainerConfig.model_validate({"forwardPorts": [70000]})

    def test_port_string_rejected(self):
        """Test that ports are not coerced from strings."""
        with pytest.raises(ValidationError):
            DevcontainerConfig.model_validate({"forwardPorts": ["3000"]})

    def test_frozen(self):
        """Test that a loaded configuration cannot be reassigned."""
        config = DevcontainerConfig.model_validate({"image": "alpine"})

        with pytest.raises(ValidationError):
            config.image = "ubuntu"

    def test_hook_properties(self):
        """Test that hook fields are exposed as HookCommand values."""
        config = DevcontainerConfig.model_validate({
            "postCreateCommand": "npm install",
            "postStartCommand": ["echo", "started"],
            "postAttachCommand": {"server": "npm start"},
        })

        assert config.post_create_hook == HookCommand(HookKind.SHELL, command="npm install")
        assert config.post_start_hook.kind is HookKind.ARGV
        assert config.post_attach_hook.kind is HookKind.UNSUPPORTED

    def test_to_json_uses_camel_case(self):
        """Test that to_json writes camelCase keys and skips unset values."""
        config = DevcontainerConfig.model_validate({
            "image": "alpine",
            "forwardPorts": [80],
        })

        output = config.to_json()
        assert '"forwardPorts"' in output
        assert '"forward_ports"' not in output
        assert '"dockerfile"' not in output


class TestHookCommand:
    """Test suite for HookCommand."""

    def test_string_runs_verbatim(self):
        """Test a single string command."""
        hook = HookCommand.from_value("make setup && make test")
        assert hook.kind is HookKind.SHELL
        assert hook.shell_command() == "make setup && make test"

    def test_list_joined_with_spaces(self):
        """Test that token lists are flattened into one command line."""
        hook = HookCommand.from_value(["echo", "hi"])
        assert hook.kind is HookKind.ARGV
        assert hook.shell_command() == "echo hi"

    def test_list_drops_non_string_tokens(self):
        """Test that non-string tokens are skipped."""
        hook = HookCommand.from_value(["echo", 1, "hi", None])
        assert hook.shell_command() == "echo hi"

    @pytest.mark.parametrize("value", [{"x": 1}, 42, True, 3.5])
    def test_other_shapes_do_nothing(self, value):
        """Test that objects and scalars resolve to no command."""
        hook = HookCommand.from_value(value)
        assert hook.kind is HookKind.UNSUPPORTED
        assert hook.shell_command() is None
