"""FastAPI dependency injection integration with Lagom."""

from lagom import Container

from infrastructure.di.container import create_container
from infrastructure.di.holder import ContainerHolder

_holder = ContainerHolder(create_container)


def get_container() -> Container:
    """Get the DI container instance.

    Every caller in the process receives the same container. Works as a plain
    call and as ``Depends(get_container)`` in route signatures.
    """
    return _holder.get()
