import importlib
import os
from unittest import mock

from databricks.sdk import useragent

import databricks.labs.urlpath
from databricks.labs.urlpath.__about__ import __version__


def test_user_agent_is_registered() -> None:
    """Ensure that importing the package registers it with the SDK user-agent."""
    assert ("urlpath", __version__) in useragent.extra()
    assert "urlpath/" + __version__ in useragent.to_string()


def test_cli_version_is_registered() -> None:
    """Ensure that the CLI version is added to the user-agent when running under the Databricks CLI."""
    original = databricks.labs.urlpath.with_user_agent_extra
    try:
        with (
            mock.patch.dict(os.environ, {"DATABRICKS_CLI_VERSION": "0.250.0"}),
            mock.patch("databricks.sdk.core.with_user_agent_extra") as with_user_agent_extra,
        ):
            importlib.reload(databricks.labs.urlpath)
    finally:
        databricks.labs.urlpath.with_user_agent_extra = original

    assert with_user_agent_extra.call_args_list == [
        mock.call("urlpath", __version__),
        mock.call("cli", "0.250.0"),
    ]
    assert ("cli", "0.250.0") not in useragent.extra()


def test_cli_version_is_optional() -> None:
    """Ensure that nothing about the CLI is registered when not running under the Databricks CLI."""
    original = databricks.labs.urlpath.with_user_agent_extra
    environ = {k: v for k, v in os.environ.items() if k != "DATABRICKS_CLI_VERSION"}
    try:
        with (
            mock.patch.dict(os.environ, environ, clear=True),
            mock.patch("databricks.sdk.core.with_user_agent_extra") as with_user_agent_extra,
        ):
            importlib.reload(databricks.labs.urlpath)
    finally:
        databricks.labs.urlpath.with_user_agent_extra = original

    with_user_agent_extra.assert_called_once_with("urlpath", __version__)
