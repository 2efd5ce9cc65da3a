from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Any, Optional


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Attributes:
        target (str):
            The original long URL that the short code redirects to.
        shortcode (str):
            The unique short identifier representing the shortened URL.
        identifier (Optional[int]):
            Sequential identifier the shortcode was generated from.
        created_at (Optional[datetime]):
            Moment the mapping was persisted (UTC).

    Example:
        >>> url = ShortURLModel(
        ...     target="https://example.com/article/123",
        ...     shortcode="3dE",
        ...     identifier=12378,
        ... )
        >>> url.target
        'https://example.com/article/123'
        >>> url.to_dict()['short_code']
        '3dE'
    """

    target: str
    shortcode: str
    identifier: Optional[int] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-serializable representation used by storage and the stats endpoint."""
        created_at = None
        if self.created_at is not None:
            # fmt: off
            created_at = self.created_at.astimezone(UTC) \
                                        .isoformat(timespec='milliseconds') \
                                        .replace('+00:00', 'Z')
            # fmt: on
        return {
            'id': self.identifier,
            'short_code': self.shortcode,
            'original_url': self.target,
            'created_at': created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ShortURLModel':
        """Build a model from the representation produced by to_dict()."""
        created_at = data.get('created_at')
        if created_at is not None:
            created_at = datetime.fromisoformat(created_at.replace('Z', '+00:00'))
        return cls(
            target=data['original_url'],
            shortcode=data['short_code'],
            identifier=data.get('id'),
            created_at=created_at,
        )
