from linkshortener.services.short_links import validate_target_url, create_short_link, resolve_short_link, get_mapping


__all__ = [
    'validate_target_url',
    'create_short_link',
    'resolve_short_link',
    'get_mapping',
]
