"""Core constants: cache key structure and shared literal values.

Single source of truth for cache key structure (DRY). Used by the key
composer, the invalidator and the cached repositories.
"""

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Glob wildcard used to build pattern-delete keys
CACHE_KEY_WILDCARD = "*"

# Redis SCAN MATCH glob syntax; never allowed inside an ID or key component
CACHE_KEY_GLOB_CHARS = frozenset("*?[]\\")

# List-read method names embedded in assignment list keys
METHOD_GET_BY_USER = "GetByUser"
METHOD_GET_BY_RESOURCE = "GetByResource"

ASSIGNMENT_LIST_METHODS = frozenset({METHOD_GET_BY_USER, METHOD_GET_BY_RESOURCE})
