"""Services package for Prompt Engineer Pro.

Submodules are loaded lazily so that importing one service does not pull in
the database engine or HTTP clients of the others.
"""

__all__ = ["AuthService", "GenerationService", "LibraryService"]


def __getattr__(name):
    if name == "AuthService":
        from .auth_service import AuthService as _AuthService

        return _AuthService
    if name == "GenerationService":
        from .generation_service import GenerationService as _GenerationService

        return _GenerationService
    if name == "LibraryService":
        from .library_service import LibraryService as _LibraryService

        return _LibraryService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
