"""Selected audio file model."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class SelectedFile:
    """Audio source chosen by the user."""
    path: Path
    name: str = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "name", self.path.name)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "SelectedFile":
        return cls(path=Path(path).expanduser().absolute())
