"""Select the process supervisor backend for the current platform."""

import os

from .ProcessSupervisor import ProcessSupervisor

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, str] = {
    "posix": "hgctl.api.supervisor._posix._Impl",
}


def detect_backend() -> str:
    """Detect the supervisor backend for the running interpreter.

    Raises:
        RuntimeError: If no backend supports this platform
    """
    backend_type = os.name
    if backend_type not in _BACKEND_REGISTRY:
        raise RuntimeError(
            f"Unsupported platform: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})"
        )
    return backend_type


def get_supervisor(backend_type: str | None = None) -> ProcessSupervisor:
    """Instantiate a supervisor backend by type (auto-detected when None)."""
    if backend_type is None:
        backend_type = detect_backend()
    if backend_type not in _BACKEND_REGISTRY:
        raise ValueError(
            f"Unsupported supervisor backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})"
        )

    # Import implementation class directly from backend _Impl module
    module = __import__(_BACKEND_REGISTRY[backend_type], fromlist=[""])
    return module._Impl()
