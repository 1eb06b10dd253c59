from lagom import Container


def create_container() -> Container:
    """Build a new, empty container.

    Each call returns a distinct instance. Entry points that want the
    process-wide container go through ``interfaces.dependencies.get_container``;
    workers and tests that want a private one call this directly.
    """
    return Container()
