from conversation_core.setup.ioc.container import (
    HandlerProvider,
    InMemoryStoreProvider,
    create_container,
)

__all__ = [
    "HandlerProvider",
    "InMemoryStoreProvider",
    "create_container",
]
