# Validation (1000-1999)
EMPTY_ROUTING_KEY = 1001
INVALID_CALLBACK_UNIQUE = 1002
INVALID_CALLBACK_PAYLOAD = 1003

# Authorization (3000-3999)
INVALID_TELEGRAM_AUTH_KEY = 3001

# External Service (5000-5999)
TELEGRAM_API_UNREACHABLE = 5001
TELEGRAM_API_REJECTED = 5002

# Configuration (7000-7999)
HANDLER_NOT_CALLABLE = 7001
MIDDLEWARE_NOT_CALLABLE = 7002
REGISTRY_FROZEN = 7003
INVALID_WORKER_COUNT = 7004
DISPATCHER_SHUT_DOWN = 7005

# Internal (8000-8999)
ROUTER_NOT_INITIALIZED = 8001
