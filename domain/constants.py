GT_CONFIG_FILENAME = "gt.config.json"
GTX_CLI_PACKAGE = "gtx-cli"

BOT_NAME = "generaltranslation-bot"
BOT_EMAIL = "bot@generaltranslation.com"

DEFAULT_NODE_VERSION = "20"
DEFAULT_WORKING_DIRECTORY = "."
DEFAULT_COMMIT_MESSAGE = "Update translations via GT Action"
DEFAULT_PULL_REQUEST_TITLE = "Update translations"
DEFAULT_PULL_REQUEST_BODY = "This PR updates translations via the GT Action"

PULL_REQUEST_URL_OUTPUT = "pull-request-url"
PULL_REQUEST_NUMBER_OUTPUT = "pull-request-number"
MISSING_TOKEN_MESSAGE = "GITHUB_TOKEN is required to create a pull request"
