from .describe import Kind, describe_value, kind_of, register_kind, type_name, unregister_kind
from .hashing import DEFAULT_ALGORITHM, check_algorithm, digest_hex, digest_prefixed
