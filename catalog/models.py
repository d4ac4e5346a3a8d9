"""Movie record parsed from the JSON data file"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from views import is_missing_score

Score = Union[str, int, float, None]


def _coerce_movie_id(value: Any) -> Optional[int]:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


@dataclass(frozen=True)
class MovieRecord:
    movie_id: Optional[int]
    title: str
    metascore: Score = None
    fields: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MovieRecord':
        if not isinstance(data, dict):
            raise ValueError(f"Movie entry must be a JSON object, got {type(data).__name__}")

        title = data.get('Title')

        return cls(
            movie_id=_coerce_movie_id(data.get('Movie_ID')),
            title='' if title is None else str(title),
            metascore=data.get('Metascore'),
            fields=dict(data)
        )

    @property
    def missing_metascore(self) -> bool:
        return is_missing_score(self.metascore)

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)
