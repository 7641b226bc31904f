"""Environment keys and fixed literals shared by the host CLI and plugins."""

ENV_TRACE = "CLOUDCLI_TRACE"
ENV_COLOR = "CLOUDCLI_COLOR"
ENV_CLOUD_NAME = "CLOUDCLI_CLOUD_NAME"
ENV_PLUGIN_NAMESPACE = "CLOUDCLI_PLUGIN_NAMESPACE"
ENV_CLI_NAME = "CLOUDCLI_CLI"
ENV_IAM_ENDPOINT = "IAM_ENDPOINT"
ENV_HOME = "CLOUDCLI_HOME"

DEFAULT_APP_NAME = "cloudcli"
DEFAULT_CLI_NAME = "cloudcli"
CONFIG_FILE_NAME = "config.json"
PLUGIN_CONFIG_FILE_NAME = "config.json"

IAM_TOKEN_PATH = "/identity/token"
UAA_TOKEN_PATH = "/oauth/token"

# Plugins built against an older SDK read the CF-scoped API endpoint.
LEGACY_ENDPOINT_SDK_VERSION = "0.1.1"
