RESOURCE_PACKAGE = "suffixsplit.common.data"
RESOURCE_PSL = "public_suffix_list.dat"

# Environment override for the list file used by the process-wide default
LIST_PATH_ENV = "SUFFIXSPLIT_LIST_PATH"

COMMENT_TOKEN = "//"
PRIVATE_DOMAINS_MARKER = "===BEGIN PRIVATE DOMAINS==="

WILDCARD_LABEL = "*"
EXCEPTION_MARKER = "!"
LABEL_SEPARATOR = "."

DEFAULT_LOG_LEVEL = "WARNING"
