# Default values of the transport and resource parsing flags
DEFAULT_ENABLED = True
DEFAULT_HTTP_SECURE = True
DEFAULT_PARSE_HLS = False
DEFAULT_PARSE_CDN_NODE = False

# CDNs queried for the node name, in match-priority order (first match wins).
# Kept as a tuple so the process-wide default can't be mutated; every options
# instance gets its own list copy.
DEFAULT_CDN_NODE_LIST = ("Akamai", "Cloudfront", "Level3", "Fastly", "Highwinds")

# Number of numbered custom parameter slots (extraparam1..extraparam10)
EXTRAPARAM_SLOTS = 10

# Environment variable that provides the account code to the options loader
ACCOUNT_CODE_ENV_VAR = "YOUBORA_ACCOUNT_CODE"
