# Prefix of the synthetic events a component emits for its own lifecycle phases
HOOK_PREFIX = "hook:"

LIFECYCLE_HOOKS = (
    "before_create",
    "created",
    "before_mount",
    "mounted",
    "before_update",
    "updated",
    "activated",
    "deactivated",
    "before_destroy",
    "destroyed",
    "error_captured",
)
