from .errors import LoaderError
from .profile_loader import load_profiles

__all__ = ["load_profiles", "LoaderError"]
