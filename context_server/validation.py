"""Validation of create requests."""

from .errors import ContentTooLarge, InvalidType, MissingFields
from .types import CONTEXT_TYPES, MAX_CONTENT_LENGTH, CreateContextArgs


def content_length(content: str) -> int:
    """Length of content in UTF-16 code units."""
    return len(content.encode("utf-16-le", "surrogatepass")) // 2


def validate_create(args: CreateContextArgs) -> CreateContextArgs:
    """
    Check a create request and return a normalized copy.

    Rules are applied in order and the first failure wins:
    required fields present and non-empty, type in CONTEXT_TYPES,
    content no longer than MAX_CONTENT_LENGTH UTF-16 code units.
    Missing tags become an empty list; given tags are passed through as-is.

    Raises:
        MissingFields, InvalidType, ContentTooLarge
    """
    if not args.name or not args.content or not args.type:
        raise MissingFields()
    if args.type not in CONTEXT_TYPES:
        raise InvalidType(args.type)
    length = content_length(args.content)
    if length > MAX_CONTENT_LENGTH:
        raise ContentTooLarge(length)

    return CreateContextArgs(
        name=args.name,
        content=args.content,
        type=args.type,
        tags=list(args.tags) if args.tags is not None else [],
    )
