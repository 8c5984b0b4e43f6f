"""Link checking constants."""

# Schemes checked over the network
HTTP_SCHEMES = frozenset({"http", "https"})

# Schemes that require a host
SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

MARKDOWN_SUFFIX = ".md"
