"""Feature modules. Each one exposes a blueprint registered in core.module_registry."""
