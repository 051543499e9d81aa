# Validation (1000-1999)
MALFORMED_WIRE_PAYLOAD = 1001
INVALID_WIRE_JSON = 1002

# Configuration (7000-7999)
INVALID_CONFIG_VALUE = 7001

# Internal (8000-8999)
UNSUPPORTED_MESSAGE_TYPE = 8001
