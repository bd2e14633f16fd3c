from .models import BuildConfig, SecretSpec, new_temp_tag

__all__ = ["BuildConfig", "SecretSpec", "new_temp_tag"]
