import yaml
from pathlib import Path
from functools import cached_property
from typing import Dict, List
from fountain_tools.connections import WhitespaceDataSource
from fountain_tools.logger import get_logger

logger = get_logger(__name__)

class UnknownProfileError(KeyError):
    """Raised when a whitespace profile name is not in the profile file."""

    def __str__(self):
        return str(self.args[0]) if self.args else super().__str__()

class ProfileFormatError(ValueError):
    """Raised when the whitespace profile file does not have the expected shape."""

class WhitespaceData(WhitespaceDataSource):
    """Named whitespace profiles loaded from packaged YAML.

    Args:
        path: Optional path-like object to read instead of the packaged file.
    """
    def __init__(self, path=None):
        source = Path(path) if path is not None else self.yaml_path()
        with source.open('r', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
        self.profiles = self._validate(raw, source)
        logger.debug("Loaded %d whitespace profiles from %s", len(self.profiles), source)

    @staticmethod
    def _validate(raw, source) -> Dict[str, dict]:
        profiles = raw.get('profiles') if isinstance(raw, dict) else None
        if not isinstance(profiles, dict):
            logger.warning("No 'profiles' mapping in %s", source)
            raise ProfileFormatError(f"{source}: expected a 'profiles' mapping")
        for name, profile in profiles.items():
            if not isinstance(profile, dict) or not isinstance(profile.get('characters'), str):
                logger.warning("Profile %r in %s has no characters string", name, source)
                raise ProfileFormatError(f"{source}: profile {name!r} needs a 'characters' string")
        return profiles

    @cached_property
    def names(self) -> List[str]:
        return list(self.profiles)

    def characters(self, name: str) -> str:
        if name not in self.profiles:
            logger.warning("Unknown whitespace profile %r", name)
            raise UnknownProfileError(
                f"unknown whitespace profile {name!r}; expected one of {', '.join(self.names)}"
            )
        return self.profiles[name]['characters']
