import os

from databricks.sdk.core import with_user_agent_extra

from databricks.labs.urlpath.__about__ import __version__
from databricks.labs.urlpath.paths import (
    ExternalPath,
    StructuralPath,
    UrlPath,
    canonicalize,
)

with_user_agent_extra("urlpath", __version__)

cli_version = os.environ.get("DATABRICKS_CLI_VERSION")
if cli_version:
    with_user_agent_extra("cli", cli_version)

__all__ = ["ExternalPath", "StructuralPath", "UrlPath", "__version__", "canonicalize"]
