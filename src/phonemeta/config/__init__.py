from .settings import BuildConfig, BuildConfigError, load_build_config

__all__ = [
    "BuildConfig",
    "BuildConfigError",
    "load_build_config",
]
