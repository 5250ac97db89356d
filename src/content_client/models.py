"""Data models for content API responses.

The API returns camelCase JSON. Each model has a ``from_dict`` constructor
that checks the shape of the decoded value and raises
ResponseValidationError naming the offending field, so callers only ever see
fully typed values.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from src.doc_tree.models import DocTreeNode

from .errors import ResponseValidationError


def _require_dict(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ResponseValidationError(
            f"expected an object, got {type(value).__name__}", path
        )
    return value


def _get_int(data: Dict[str, Any], key: str, path: str, required: bool = True,
             default: Optional[int] = None) -> Optional[int]:
    value = data.get(key)
    if value is None:
        if required:
            raise ResponseValidationError("missing required field", f"{path}.{key}")
        return default
    # bool is an int subclass but never a valid id or count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ResponseValidationError(
            f"expected an integer, got {type(value).__name__}", f"{path}.{key}"
        )
    return value


def _get_str(data: Dict[str, Any], key: str, path: str, required: bool = True,
             default: Optional[str] = None) -> Optional[str]:
    value = data.get(key)
    if value is None:
        if required:
            raise ResponseValidationError("missing required field", f"{path}.{key}")
        return default
    if not isinstance(value, str):
        raise ResponseValidationError(
            f"expected a string, got {type(value).__name__}", f"{path}.{key}"
        )
    return value


def _get_bool(data: Dict[str, Any], key: str, path: str, default: bool = False) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ResponseValidationError(
            f"expected a boolean, got {type(value).__name__}", f"{path}.{key}"
        )
    return value


def _get_list(data: Dict[str, Any], key: str, path: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ResponseValidationError(
            f"expected a list, got {type(value).__name__}", f"{path}.{key}"
        )
    return value


@dataclass
class Tag:
    """A tag attached to an item."""
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Any, path: str = "tag") -> "Tag":
        data = _require_dict(data, path)
        return cls(id=_get_int(data, 'id', path), name=_get_str(data, 'name', path))


@dataclass
class Seo:
    """Search engine metadata for an item."""
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, path: str = "seo") -> "Seo":
        data = _require_dict(data, path)
        keywords = _get_list(data, 'keywords', path)
        for i, keyword in enumerate(keywords):
            if not isinstance(keyword, str):
                raise ResponseValidationError(
                    f"expected a string, got {type(keyword).__name__}",
                    f"{path}.keywords[{i}]",
                )
        return cls(
            title=_get_str(data, 'title', path, required=False),
            description=_get_str(data, 'description', path, required=False),
            image=_get_str(data, 'image', path, required=False),
            keywords=list(keywords),
        )


@dataclass
class Organization:
    """The tenant whose content is served."""
    id: str
    name: str
    slug: str

    @classmethod
    def from_dict(cls, data: Any, path: str = "organization") -> "Organization":
        data = _require_dict(data, path)
        raw_id = data.get('id')
        if raw_id is None or isinstance(raw_id, bool) or not isinstance(raw_id, (str, int)):
            raise ResponseValidationError("expected a string or integer id", f"{path}.id")
        return cls(
            id=str(raw_id),
            name=_get_str(data, 'name', path),
            slug=_get_str(data, 'slug', path),
        )


@dataclass
class Author:
    """The user who created an item."""
    name: str
    image: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "createdByUser") -> "Author":
        data = _require_dict(data, path)
        return cls(
            name=_get_str(data, 'name', path),
            image=_get_str(data, 'image', path, required=False),
        )


@dataclass
class Item:
    """A content unit (blog post or documentation page).

    Attributes:
        id: Unique numeric identifier
        name: Display name
        slug: URL-safe identifier used in routes
        created_at: ISO 8601 creation timestamp
        updated_at: ISO 8601 last update timestamp
        published: Whether the item is publicly visible
        parent_id: Parent item id (None for top-level items)
        has_children: Whether the API reports child items
        seo: Optional search engine metadata
        tags: Tags attached to the item
        organization: Owning organization, when included
        created_by_user: Authoring user, when included
        html_content: Rendered HTML body, when requested
        text_content: Plain text excerpt, when provided
        content: Structured body as returned by the API (opaque)
    """
    id: int
    name: str
    slug: str
    created_at: str = ""
    updated_at: str = ""
    published: bool = False
    parent_id: Optional[int] = None
    has_children: bool = False
    seo: Optional[Seo] = None
    tags: List[Tag] = field(default_factory=list)
    organization: Optional[Organization] = None
    created_by_user: Optional[Author] = None
    html_content: Optional[str] = None
    text_content: Optional[str] = None
    content: Any = None

    @classmethod
    def from_dict(cls, data: Any, path: str = "item") -> "Item":
        data = _require_dict(data, path)

        seo = data.get('seo')
        organization = data.get('organization')
        author = data.get('createdByUser')

        return cls(
            id=_get_int(data, 'id', path),
            name=_get_str(data, 'name', path),
            slug=_get_str(data, 'slug', path),
            created_at=_get_str(data, 'createdAt', path, required=False, default=""),
            updated_at=_get_str(data, 'updatedAt', path, required=False, default=""),
            published=_get_bool(data, 'published', path),
            parent_id=_get_int(data, 'parentId', path, required=False),
            has_children=_get_bool(data, 'hasChildren', path),
            seo=Seo.from_dict(seo, f"{path}.seo") if seo is not None else None,
            tags=[
                Tag.from_dict(tag, f"{path}.tags[{i}]")
                for i, tag in enumerate(_get_list(data, 'tags', path))
            ],
            organization=(
                Organization.from_dict(organization, f"{path}.organization")
                if organization is not None else None
            ),
            created_by_user=(
                Author.from_dict(author, f"{path}.createdByUser")
                if author is not None else None
            ),
            html_content=_get_str(data, 'htmlContent', path, required=False),
            text_content=_get_str(data, 'textContent', path, required=False),
            content=data.get('content'),
        )


@dataclass
class Pagination:
    """Pagination block returned with list responses."""
    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next: bool = False
    has_prev: bool = False

    @classmethod
    def from_dict(cls, data: Any, path: str = "pagination") -> "Pagination":
        data = _require_dict(data, path)
        return cls(
            page=_get_int(data, 'page', path),
            limit=_get_int(data, 'limit', path),
            total_count=_get_int(data, 'totalCount', path),
            total_pages=_get_int(data, 'totalPages', path),
            has_next=_get_bool(data, 'hasNext', path),
            has_prev=_get_bool(data, 'hasPrev', path),
        )


@dataclass
class ItemsPage:
    """One page of items from the list endpoint."""
    items: List[Item]
    pagination: Pagination
    organization: Organization

    @classmethod
    def from_dict(cls, data: Any) -> "ItemsPage":
        data = _require_dict(data, "response")

        # The API names the list "posts"; "items" is accepted as an alias
        key = 'posts' if 'posts' in data else 'items'
        if key not in data:
            raise ResponseValidationError("missing required field", "response.posts")
        raw_items = _get_list(data, key, "response")

        items = [Item.from_dict(raw, f"{key}[{i}]") for i, raw in enumerate(raw_items)]

        seen = set()
        for item in items:
            if item.id in seen:
                raise ResponseValidationError(f"duplicate item id {item.id}", key)
            seen.add(item.id)

        if data.get('pagination') is None:
            raise ResponseValidationError("missing required field", "pagination")
        if data.get('organization') is None:
            raise ResponseValidationError("missing required field", "organization")

        return cls(
            items=items,
            pagination=Pagination.from_dict(data['pagination']),
            organization=Organization.from_dict(data['organization']),
        )


@dataclass
class DocsTree:
    """Document tree for one page of items, with the page metadata."""
    tree: List[DocTreeNode]
    pagination: Pagination
    organization: Organization
